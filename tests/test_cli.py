"""Tests for the hslcolor command line: command discovery and end-to-end runs."""

import json
from pathlib import Path

import pytest
from hslcolor import registry
from hslcolor.__main__ import main
from hslcolor.commands import COMMANDS, rand
from hslcolor.core.types import Command
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from a clean repo root with no HSLCOLOR_* settings."""
    for key in ('HSLCOLOR_SEED', 'HSLCOLOR_NEAREST_THRESHOLD', 'HSLCOLOR_JSON'):
        monkeypatch.delenv(key, raising=False)
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(registry.all_commands()) == {'dist', 'rand', 'show', 'swatch'}

    def test_commands_are_command_objects(self):
        for cmd in registry.all_commands().values():
            assert isinstance(cmd, Command)

    def test_registered_from_commands_tuple(self):
        assert sorted(registry.all_commands()) == sorted(m.command.name for m in COMMANDS)

    def test_doc_is_module_docstring(self):
        assert registry.doc('rand') == rand.__doc__.strip()
        assert 'HSLCOLOR_SEED' in registry.doc('rand')

    def test_unknown_command(self):
        with pytest.raises(KeyError, match='Unknown command'):
            registry.get('nope')

    def test_command_without_run_function(self):
        with pytest.raises(RuntimeError):
            Command(name='empty').execute(None, None, None)


class TestShow:
    def test_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['show', 'navy', 'rgb(23,217,143)'])
        out = capsys.readouterr().out
        assert '#000080' in out
        assert '~navy' in out
        assert '#17d98f' in out

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['--json', 'show', 'hsl(90,90%,50%)'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['colors'][0]['hex'] == '#80f20d'
        assert obj['colors'][0]['label'] == 'hsl(90,90%,50%)'

    def test_json_from_settings(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (isolated_env / '.env').write_text('HSLCOLOR_JSON=1\n')
        main(['show', '#fff'])
        captured = capsys.readouterr()
        assert json.loads(captured.out)['colors'][0]['hex'] == '#ffffff'
        assert 'hslcolor: loaded' in captured.err

    def test_range_error_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['show', 'rgb(300,0,0)'])
        assert exc.value.code == 1
        assert 'R value' in capsys.readouterr().err

    def test_parse_error_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['show', 'notacolor'])
        assert exc.value.code == 1
        assert 'hslcolor: error:' in capsys.readouterr().err


class TestRand:
    def test_fixed_ranges(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['--json', 'rand', '-n', '3', '--hue', '100', '100', '--sat', '1', '1', '--lum', '0.5', '0.5'])
        obj = json.loads(capsys.readouterr().out)
        assert len(obj['colors']) == 3
        for entry in obj['colors']:
            assert entry['hex'] == '#55ff00'
            assert entry['hsl'][0] == 100

    def test_hue_bounds_without_whole_degree(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['rand', '--hue', '0.5', '0.9', '--sat', '1', '1', '--lum', '0.5', '0.5'])
        assert exc.value.code == 1
        assert 'no whole degree' in capsys.readouterr().err

    def test_seed_repeatable(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['--json', 'rand', '-n', '4', '--seed', '11'])
        first = capsys.readouterr().out
        main(['--json', 'rand', '-n', '4', '--seed', '11'])
        assert capsys.readouterr().out == first

    def test_seed_from_environment(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setenv('HSLCOLOR_SEED', '5')
        main(['--json', 'rand', '-n', '2'])
        first = capsys.readouterr().out
        main(['--json', 'rand', '-n', '2', '--seed', '5'])
        assert capsys.readouterr().out == first


class TestDist:
    def test_black_white(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['dist', 'black', 'white'])
        assert 'distance: 441.7' in capsys.readouterr().out

    def test_json_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['--json', 'dist', '#9668c2', '#9668c2'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['summary']['distance'] == 0.0


class TestSwatch:
    def test_renders_strip(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = isolated_env / 'out' / 'swatch.png'
        main(['swatch', str(out), 'red', '#00f', '--size', '4'])
        img = Image.open(out).convert('RGB')
        assert img.size == (8, 4)
        assert img.getpixel((0, 0)) == (255, 0, 0)
        assert img.getpixel((7, 3)) == (0, 0, 255)
        assert 'size: 8x4' in capsys.readouterr().out

    def test_bad_size(self, isolated_env: Path) -> None:
        with pytest.raises(SystemExit):
            main(['swatch', str(isolated_env / 's.png'), 'red', '--size', '0'])


class TestHelp:
    def test_lists_commands(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('dist', 'rand', 'show', 'swatch'):
            assert name in out

    def test_command_docs(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'rand'])
        assert 'HSLCOLOR_SEED' in capsys.readouterr().out

    def test_unknown_topic(self) -> None:
        with pytest.raises(SystemExit):
            main(['help', 'nope'])

    def test_no_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])
