"""
設定管理のユニットテスト
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from unmovable.core.events import ConfigChanged
from unmovable.core.exceptions import ConfigurationError
from unmovable.core.models import DemotionPolicy
from unmovable.utils.config import Config


class TestConfigFileLoading:
    """設定ファイル読み込みのテスト"""

    def test_default_config(self, temp_dir: Path):
        """デフォルト設定のテスト"""
        config = Config(project_root=temp_dir)

        assert config.get("preserve_menu") is False
        assert config.get("demotion_policy") == "swap"
        assert config.get("label_matching") is True
        assert config.get("log_level") == "INFO"
        assert config.config_file == temp_dir / "unmovable.toml"

    def test_project_config_file_loading(self, temp_dir: Path):
        """プロジェクト設定ファイル読み込みのテスト"""
        (temp_dir / "unmovable.toml").write_text("""
[unmovable]
preserve_menu = true
demotion_policy = "rotate"
""")

        config = Config(project_root=temp_dir)

        assert config.get("preserve_menu") is True
        assert config.get("demotion_policy") == "rotate"
        # デフォルト値は保持される
        assert config.get("label_matching") is True

    def test_host_key_name_alias(self, temp_dir: Path):
        """preserveMenu のキー名でも読み込める"""
        (temp_dir / "unmovable.toml").write_text("[unmovable]\npreserveMenu = true\n")

        config = Config(project_root=temp_dir)

        assert config.get("preserve_menu") is True

    def test_explicit_config_file(self, temp_dir: Path):
        config_file = temp_dir / "custom.toml"
        config_file.write_text("[unmovable]\nlabel_matching = false\n")

        config = Config(project_root=temp_dir, config_file=config_file)

        assert config.get("label_matching") is False

    def test_invalid_toml_file(self, temp_dir: Path):
        """無効なTOMLファイルのテスト"""
        (temp_dir / "unmovable.toml").write_text("invalid toml content [")

        with pytest.raises(ConfigurationError) as exc_info:
            Config(project_root=temp_dir)

        assert "設定ファイルの読み込みに失敗しました" in str(exc_info.value)

    def test_other_sections_ignored(self, temp_dir: Path):
        (temp_dir / "unmovable.toml").write_text("[other]\npreserve_menu = true\n")

        config = Config(project_root=temp_dir)

        assert config.get("preserve_menu") is False


class TestEnvironmentVariables:
    """環境変数による設定上書きのテスト"""

    @pytest.mark.parametrize(
        ("env_value", "expected"),
        [("true", True), ("True", True), ("1", True), ("yes", True), ("on", True), ("false", False), ("0", False)],
    )
    def test_env_config_override_boolean(self, temp_dir: Path, monkeypatch, env_value, expected):
        monkeypatch.setenv("UNMOVABLE_PRESERVE_MENU", env_value)

        config = Config(project_root=temp_dir)

        assert config.get("preserve_menu") is expected

    def test_env_overrides_file(self, temp_dir: Path, monkeypatch):
        """環境変数が設定ファイルより優先される"""
        (temp_dir / "unmovable.toml").write_text('[unmovable]\ndemotion_policy = "rotate"\n')
        monkeypatch.setenv("UNMOVABLE_DEMOTION_POLICY", "swap")

        config = Config(project_root=temp_dir)

        assert config.get("demotion_policy") == "swap"


class TestConfigChanges:
    """設定変更と通知のテスト"""

    def test_set_notifies_listener(self, sample_config: Config):
        listener = Mock()
        sample_config.add_listener(listener)

        sample_config.set("preserve_menu", True)

        listener.assert_called_once()
        event = listener.call_args[0][0]
        assert isinstance(event, ConfigChanged)
        assert event.group == "unmovable"
        assert event.key == "preserve_menu"
        assert event.old_value is False
        assert event.new_value is True

    def test_set_same_value_does_not_notify(self, sample_config: Config):
        listener = Mock()
        sample_config.add_listener(listener)

        sample_config.set("preserve_menu", False)

        listener.assert_not_called()

    def test_remove_listener(self, sample_config: Config):
        listener = Mock()
        sample_config.add_listener(listener)
        sample_config.remove_listener(listener)

        sample_config.set("preserve_menu", True)

        listener.assert_not_called()

    def test_set_unknown_key(self, sample_config: Config):
        with pytest.raises(ConfigurationError):
            sample_config.set("unknown_key", 1)


class TestConfigValidation:
    """設定の妥当性チェックのテスト"""

    def test_default_config_is_valid(self, sample_config: Config):
        sample_config.validate()

    def test_get_demotion_policy(self, sample_config: Config):
        assert sample_config.get_demotion_policy() is DemotionPolicy.SWAP_WITH_CANCEL

        sample_config.set("demotion_policy", "rotate")
        assert sample_config.get_demotion_policy() is DemotionPolicy.ROTATE

    def test_invalid_demotion_policy_rejected_by_set(self, sample_config: Config):
        """無効な降格方法は保存されず、通知もされない"""
        listener = Mock()
        sample_config.add_listener(listener)

        with pytest.raises(ConfigurationError) as exc_info:
            sample_config.set("demotion_policy", "shuffle")

        assert "demotion_policy" in str(exc_info.value)
        assert sample_config.get("demotion_policy") == "swap"
        listener.assert_not_called()
        sample_config.validate()

    def test_invalid_log_level_rejected_by_set(self, sample_config: Config):
        with pytest.raises(ConfigurationError):
            sample_config.set("log_level", "LOUD")

        assert sample_config.get("log_level") == "INFO"

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_non_boolean_set_rejected(self, sample_config: Config, value):
        """bool 以外の値は文字列 "false" を含めて拒否される"""
        with pytest.raises(ConfigurationError):
            sample_config.set("preserve_menu", value)

        assert sample_config.get("preserve_menu") is False

    def test_set_after_rejected_value(self, sample_config: Config):
        """拒否された後も他の設定は変更できる"""
        with pytest.raises(ConfigurationError):
            sample_config.set("demotion_policy", "shuffle")

        sample_config.set("preserve_menu", True)

        assert sample_config.get_bool("preserve_menu") is True
        assert sample_config.get_demotion_policy() is DemotionPolicy.SWAP_WITH_CANCEL

    def test_get_bool(self, sample_config: Config):
        assert sample_config.get_bool("preserve_menu") is False
        assert sample_config.get_bool("label_matching") is True

    def test_non_boolean_preserve_menu(self, temp_dir: Path):
        (temp_dir / "unmovable.toml").write_text('[unmovable]\npreserve_menu = "maybe"\n')
        config = Config(project_root=temp_dir)

        with pytest.raises(ConfigurationError):
            config.validate()
        with pytest.raises(ConfigurationError):
            config.get_bool("preserve_menu")

    def test_invalid_demotion_policy_in_file(self, temp_dir: Path):
        (temp_dir / "unmovable.toml").write_text('[unmovable]\ndemotion_policy = "shuffle"\n')
        config = Config(project_root=temp_dir)

        with pytest.raises(ConfigurationError):
            config.get_demotion_policy()

    @pytest.mark.parametrize("content", ["unmovable = 1\n", 'unmovable = "on"\n', "unmovable = [true]\n"])
    def test_scalar_section_rejected(self, temp_dir: Path, content):
        """[unmovable] がテーブルでない場合は ConfigurationError"""
        (temp_dir / "unmovable.toml").write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            Config(project_root=temp_dir)

        assert "テーブル" in str(exc_info.value)


class TestConfigAccess:
    """辞書風アクセスのテスト"""

    def test_getitem_and_contains(self, sample_config: Config):
        assert sample_config["demotion_policy"] == "swap"
        assert "preserve_menu" in sample_config
        assert "missing" not in sample_config

    def test_as_dict_is_copy(self, sample_config: Config):
        data = sample_config.as_dict()
        data["preserve_menu"] = True

        assert sample_config.get("preserve_menu") is False

    def test_config_items_describe_preserve_menu(self):
        item = Config.CONFIG_ITEMS["preserve_menu"]

        assert item["key_name"] == "preserveMenu"
        assert item["name"] == "Preserve menu"
        assert item["description"] == "When enabled, swaps 'walk here' with 'cancel' instead of removing it"
