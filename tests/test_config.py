"""
Unit tests for versioninfo.config module
"""
import unittest
import tempfile
import os
import shutil
import json
from pathlib import Path
from unittest.mock import patch

from versioninfo.config import (
    load_config,
    get_config_path,
    get_default_config,
    merge_configs,
    apply_env_overrides,
)


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up an isolated HOME without VERSIONINFO_* variables"""
        self.temp_dir = tempfile.mkdtemp()
        env = {k: v for k, v in os.environ.items() if not k.startswith('VERSIONINFO_')}
        env['HOME'] = self.temp_dir
        self.env_patcher = patch.dict(os.environ, env, clear=True)
        self.env_patcher.start()

    def tearDown(self):
        """Clean up test environment"""
        self.env_patcher.stop()
        shutil.rmtree(self.temp_dir)

    def write_config(self, filename, content):
        config_dir = Path(self.temp_dir) / '.versioninfo'
        config_dir.mkdir(exist_ok=True)
        path = config_dir / filename
        path.write_text(content)
        return path

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertEqual(config['docs']['host'], 'code.angularjs.org')
        self.assertEqual(config['versions']['stable_range'], '1.0 || 1.2')
        self.assertEqual(config['versions']['build_number_env'], ['TRAVIS_BUILD_NUMBER', 'BUILD_NUMBER'])
        self.assertEqual(config['manifest']['filename'], 'package.json')
        self.assertIn('level', config['logging'])

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        config = load_config()
        self.assertEqual(config, get_default_config())

    def test_default_config_path(self):
        self.assertEqual(get_config_path(), Path(self.temp_dir) / '.versioninfo' / 'config.json')

    def test_load_json_config(self):
        self.write_config('config.json', json.dumps({"docs": {"host": "docs.example.com"}}))
        config = load_config()
        self.assertEqual(config['docs']['host'], 'docs.example.com')
        # Untouched sections keep their defaults
        self.assertEqual(config['versions']['stable_range'], '1.0 || 1.2')

    def test_load_toml_config(self):
        self.write_config('config.toml', '[versions]\nstable_range = "2.x"\n')
        config = load_config()
        self.assertEqual(config['versions']['stable_range'], '2.x')

    def test_load_yaml_config(self):
        self.write_config('config.yaml', 'git:\n  timeout: 5\n')
        config = load_config()
        self.assertEqual(config['git']['timeout'], 5)

    def test_config_path_from_env(self):
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text(json.dumps({"manifest": {"filename": "bower.json"}}))
        os.environ['VERSIONINFO_CONFIG'] = str(path)
        self.assertEqual(get_config_path(), path)
        self.assertEqual(load_config()['manifest']['filename'], 'bower.json')

    def test_invalid_config_keeps_defaults(self):
        self.write_config('config.json', '{broken')
        with self.assertLogs('versioninfo', level='ERROR'):
            config = load_config()
        self.assertEqual(config['docs']['host'], 'code.angularjs.org')


class TestConfigMerging(unittest.TestCase):
    """Test merge and environment override helpers"""

    def test_merge_configs_nested(self):
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        merged = merge_configs(base, {"a": {"c": 20}, "e": 5})
        self.assertEqual(merged, {"a": {"b": 1, "c": 20}, "d": 3, "e": 5})

    def test_env_override_string(self):
        with patch.dict(os.environ, {'VERSIONINFO_DOCS_HOST': 'docs.example.com'}):
            config = apply_env_overrides(get_default_config())
        self.assertEqual(config['docs']['host'], 'docs.example.com')

    def test_env_override_int(self):
        with patch.dict(os.environ, {'VERSIONINFO_GIT_TIMEOUT': '5'}):
            config = apply_env_overrides(get_default_config())
        self.assertEqual(config['git']['timeout'], 5)

    def test_env_override_underscored_key(self):
        with patch.dict(os.environ, {'VERSIONINFO_VERSIONS_STABLE_RANGE': '2.x'}):
            config = apply_env_overrides(get_default_config())
        self.assertEqual(config['versions']['stable_range'], '2.x')

    def test_env_override_list(self):
        with patch.dict(os.environ, {'VERSIONINFO_VERSIONS_BUILD_NUMBER_ENV': 'CI_PIPELINE_IID, BUILD_NUMBER'}):
            config = apply_env_overrides(get_default_config())
        self.assertEqual(config['versions']['build_number_env'], ['CI_PIPELINE_IID', 'BUILD_NUMBER'])

    def test_unknown_env_ignored(self):
        with patch.dict(os.environ, {'VERSIONINFO_NOPE': 'x'}):
            config = apply_env_overrides(get_default_config())
        self.assertEqual(config, get_default_config())


if __name__ == '__main__':
    unittest.main()
