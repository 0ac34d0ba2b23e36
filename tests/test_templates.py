"""
Unit Tests for Project Templates
"""

import json
import pytest
from hypothesis import given, strategies as st

from deployer import templates
from deployer.config import CHAIN_ID, DEFAULT_RPC_URL, HARDHAT_NETWORK, DeployerConfig


RENDERERS_WITH_URL = [
    templates.render_hardhat_config,
    templates.render_deploy_script,
    templates.render_env_template,
    templates.render_monitor_script
]


class TestTemplateStability:
    """Identical inputs always give identical file contents"""

    @given(rpc_url=st.text())
    def test_url_templates_are_byte_stable(self, rpc_url):
        for render in RENDERERS_WITH_URL:
            assert render(rpc_url).encode('utf-8') == render(rpc_url).encode('utf-8')

    @given(project_name=st.text(min_size=1))
    def test_package_json_is_byte_stable(self, project_name):
        assert templates.render_package_json(project_name) == templates.render_package_json(project_name)

    @given(rpc_url=st.text())
    def test_generated_python_always_compiles(self, rpc_url):
        """Any URL is quoted into valid Python"""
        compile(templates.render_deploy_script(rpc_url), 'deploy.py', 'exec')
        compile(templates.render_monitor_script(rpc_url), 'monitor.py', 'exec')

    def test_fixed_templates_are_constant(self):
        assert templates.render_contract_source() == templates.render_contract_source()
        assert templates.render_gitignore() == templates.render_gitignore()


class TestTemplateContents:
    """Test generated file contents"""

    def test_package_json(self):
        manifest = json.loads(templates.render_package_json('air-token-project'))

        assert manifest['name'] == 'air-token-project'
        assert manifest['version'] == '1.0.0'
        assert manifest['scripts']['compile'] == 'npx hardhat compile'
        assert 'hardhat' in manifest['devDependencies']
        assert '@openzeppelin/contracts' in manifest['devDependencies']

    def test_hardhat_config_uses_rpc_url(self):
        config = templates.render_hardhat_config(DEFAULT_RPC_URL)

        assert f'url: "{DEFAULT_RPC_URL}"' in config
        assert f'chainId: {CHAIN_ID}' in config
        assert f'{HARDHAT_NETWORK}:' in config
        assert 'solidity: "0.8.20"' in config

    def test_hardhat_config_escapes_quotes(self):
        config = templates.render_hardhat_config('http://a"b')

        assert 'url: "http://a\\"b"' in config

    def test_contract_source(self):
        source = templates.render_contract_source()

        assert source.startswith('// SPDX-License-Identifier: MIT')
        assert 'contract AIR is ERC20, Ownable' in source
        assert 'ERC20("AIR Token", "AIR")' in source
        assert 'function mint(address to, uint256 amount) public onlyOwner' in source

    def test_env_template(self):
        assert templates.render_env_template('http://node') == (
            "PRIVATE_KEY=\nRPC_URL=http://node\n"
        )

    def test_unedited_env_template_has_no_credential(self):
        """Copying .env.example to .env unchanged does not count as a key"""
        lines = templates.render_env_template(DEFAULT_RPC_URL).splitlines()
        environ = dict(line.split('=', 1) for line in lines)

        assert not DeployerConfig.from_env(environ=environ).has_credential()

    def test_gitignore(self):
        lines = templates.render_gitignore().splitlines()

        for entry in ['node_modules/', '.env', 'deployment-info.json', 'artifacts/', 'cache/']:
            assert entry in lines

    def test_deploy_script_records_network(self):
        script = templates.render_deploy_script(DEFAULT_RPC_URL)

        assert 'NETWORK = "base-sepolia"' in script
        assert f'DEFAULT_RPC_URL = "{DEFAULT_RPC_URL}"' in script
        assert 'DEPLOYMENT_INFO_PATH = "deployment-info.json"' in script

    def test_monitor_script_bakes_rpc_url(self):
        script = templates.render_monitor_script('http://node:8545')

        assert 'RPC_URL = "http://node:8545"' in script
        assert 'EXPLORER_URL = "https://sepolia.basescan.org/address/"' in script

    @pytest.mark.parametrize('render', RENDERERS_WITH_URL)
    def test_different_urls_give_different_output(self, render):
        assert render('http://a') != render('http://b')
