"""Tests for palette_gen.core.config — .env discovery and Settings."""

from pathlib import Path

import pytest
from palette_gen.core.config import Settings, find_env_file, load_settings, read_env_file, settings_from_mapping


class TestReadEnvFile:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('PALETTE_STYLE=triadic\n')
        assert read_env_file(f) == {'PALETTE_STYLE': 'triadic'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="hello world"\nB=\'single\'\n')
        assert read_env_file(f) == {'A': 'hello world', 'B': 'single'}

    def test_comments_blank_and_junk_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nNOEQUALS\nA=1\n')
        assert read_env_file(f) == {'A': '1'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export PALETTE_SEED=5\n')
        assert read_env_file(f) == {'PALETTE_SEED': '5'}


class TestFindEnvFile:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_env_file(tmp_path) == dotenv.resolve()

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        sub = tmp_path / 'sub'
        sub.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_env_file(sub) == dotenv.resolve()

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_env_file(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../elsewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert find_env_file(repo) is None


class TestSettingsFromMapping:
    def test_defaults(self) -> None:
        assert settings_from_mapping({}) == Settings()

    def test_all_values(self) -> None:
        s = settings_from_mapping(
            {
                'PALETTE_SEED': '42',
                'PALETTE_JITTER': 'Yes',
                'PALETTE_STYLE': 'Tetradic',
                'PALETTE_LOG_LEVEL': 'debug',
            }
        )
        assert s.seed == 42
        assert s.jitter is True
        assert s.style == 'tetradic'
        assert s.log_level == 'DEBUG'

    @pytest.mark.parametrize('value', ['0', 'no', 'off', ''])
    def test_jitter_falsy(self, value: str) -> None:
        assert settings_from_mapping({'PALETTE_JITTER': value}).jitter is False

    def test_bad_seed_raises(self) -> None:
        with pytest.raises(ValueError, match='PALETTE_SEED'):
            settings_from_mapping({'PALETTE_SEED': 'abc'})

    def test_unknown_style_raises(self) -> None:
        with pytest.raises(ValueError, match='PALETTE_STYLE must be one of analogous') as exc:
            settings_from_mapping({'PALETTE_STYLE': 'pastel'})
        assert "'pastel'" in str(exc.value)

    def test_blank_style_uses_default(self) -> None:
        assert settings_from_mapping({'PALETTE_STYLE': '  '}).style == 'analogous'


class TestLoadSettings:
    def test_reads_dotenv_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('PALETTE_STYLE=triadic\nPALETTE_SEED=3\n')
        monkeypatch.chdir(tmp_path)
        s = load_settings(environ={})
        assert s.style == 'triadic'
        assert s.seed == 3
        assert s.source == (tmp_path / '.env').resolve()

    def test_environment_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('PALETTE_STYLE=triadic\n')
        monkeypatch.chdir(tmp_path)
        s = load_settings(environ={'PALETTE_STYLE': 'monochromatic'})
        assert s.style == 'monochromatic'

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        custom = tmp_path / 'custom.env'
        custom.write_text('PALETTE_JITTER=1\n')
        s = load_settings(env_file=str(custom), environ={})
        assert s.jitter is True
        assert s.source == custom

    def test_missing_explicit_file_gives_defaults(self, tmp_path: Path) -> None:
        s = load_settings(env_file=str(tmp_path / 'nope.env'), environ={})
        assert s == Settings()

    def test_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_settings(environ={}) == Settings()

    def test_process_environment_used_by_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv('PALETTE_SEED', '99')
        assert load_settings().seed == 99
