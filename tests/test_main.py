import pytest

from ptbuilder.main import get_log_level, main

DRAFT = '''
[[devices]]
name = "R1"
model = "2811"
x = 0
y = 0

[[devices]]
name = "S1"
model = "2960-24TT"
x = 200
y = 0

[[links]]
device1_name = "R1"
device1_interface = "FastEthernet0/0"
device2_name = "S1"
device2_interface = "FastEthernet0/1"
link_type = "Copper Straight-Through"
'''

BROKEN = '''
[[devices]]
name = "R1"
model = "2811"
x = 0
y = 0

[[links]]
device1_name = "R1"
device1_interface = "FastEthernet0/0"
device2_name = "S9"
device2_interface = "FastEthernet0/1"
link_type = "Copper Straight-Through"
'''


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lab.toml").write_text(DRAFT, encoding="utf-8")
    (tmp_path / "broken.toml").write_text(BROKEN, encoding="utf-8")
    return tmp_path


def test_generate_to_stdout(workdir, capsys):
    assert main(["lab.toml"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        'addDevice("R1", "2811", 0, 0);',
        'addDevice("S1", "2960-24TT", 200, 0);',
        'addLink("R1", "FastEthernet0/0", "S1", "FastEthernet0/1", "Copper Straight-Through");',
    ]


def test_generate_refuses_invalid_draft(workdir, capsys):
    assert main(["broken.toml"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing device 'S9'" in captured.err


def test_no_validate_generates_anyway(workdir, capsys):
    assert main(["--no-validate", "broken.toml"]) == 0
    assert "addLink" in capsys.readouterr().out


def test_validate_only(workdir, capsys):
    assert main(["--validate-only", "lab.toml"]) == 0
    assert "Topology is valid." in capsys.readouterr().out
    assert main(["--validate-only", "broken.toml"]) == 1
    assert "Topology has 1 validation error(s)." in capsys.readouterr().out


def test_output_file_and_overwrite(workdir):
    assert main(["lab.toml", "-o", "lab.js"]) == 0
    assert (workdir / "lab.js").read_text(encoding="utf-8").startswith('addDevice("R1"')
    assert main(["lab.toml", "-o", "lab.js"]) == 1
    assert main(["lab.toml", "-o", "lab.js", "--overwrite"]) == 0


def test_list_catalog(workdir, capsys):
    assert main(["--list-catalog", "devices", "--starts-with", "28", "--limit", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("devices: ")
    assert 1 <= len(lines[1:]) <= 2
    assert all(line.startswith("28") for line in lines[1:])


def test_list_catalog_limit_out_of_range(workdir):
    with pytest.raises(SystemExit):
        main(["--list-catalog", "links", "--limit", "0"])


def test_missing_draft_argument(workdir):
    assert main([]) == 1


def test_catalog_from_config(workdir, capsys):
    (workdir / "catalog.toml").write_text('[devices]\n"X1" = 0\n', encoding="utf-8")
    (workdir / "config.toml").write_text('catalog = "catalog.toml"\n', encoding="utf-8")
    assert main(["--list-catalog", "devices"]) == 0
    assert capsys.readouterr().out.splitlines() == ["devices: 1 of 1", "X1"]


def test_bad_catalog_is_fatal(workdir):
    (workdir / "config.toml").write_text('catalog = "missing.toml"\n', encoding="utf-8")
    assert main(["lab.toml"]) == 1


def test_write_config(workdir):
    assert main(["-c", "out.toml", "-w"]) == 0
    assert "list_limit = 200" in (workdir / "out.toml").read_text(encoding="utf-8")


def test_get_log_level():
    assert get_log_level("info") == (20, False)
    assert get_log_level("chatty") == (30, True)
