from passforms.cli import EXIT_ERROR, EXIT_OK, EXIT_WEAK, main
from passforms.config import load_config
from passforms.evaluator import assess

def test_generate(capsys):
    assert main(["generate", "--length", "10", "--copies", "3"]) == EXIT_OK
    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("Password #")]
    assert len(lines) == 3
    for line in lines:
        pw = line.split(": ", 1)[1]
        assert len(pw) == 10
        assert assess(pw)

def test_generate_invalid_length(capsys):
    assert main(["generate", "--length", "4"]) == EXIT_ERROR
    assert "InvalidLength" in capsys.readouterr().out

def test_generate_invalid_alphabet(capsys):
    assert main(["generate", "--alphabet", "0123456789"]) == EXIT_ERROR
    assert "InvalidAlphabet" in capsys.readouterr().out

def test_check(capsys):
    assert main(["check", "Tr0ub4x!"]) == EXIT_OK
    assert "GOOD" in capsys.readouterr().out
    assert main(["check", "qwerty"]) == EXIT_WEAK
    assert "WEAK" in capsys.readouterr().out
    assert main(["check", "qwerty", "--no-digits-check"]) == EXIT_WEAK
    assert "keyboard" in capsys.readouterr().out

def test_forms(capsys):
    assert main(["forms", "abCD1%", "--lang", "en"]) == EXIT_OK
    out = capsys.readouterr().out
    for form in ("фиСВ1%", "ABcd1%", "ФИсв1%"):
        assert form in out

def test_config_set_and_show(capsys):
    assert main(["config", "set", "length", "14"]) == EXIT_OK
    assert load_config()["length"] == 14
    assert main(["config", "set", "nope", "1"]) == EXIT_ERROR
    capsys.readouterr()
    assert main(["config", "show"]) == EXIT_OK
    assert "14" in capsys.readouterr().out

def test_generate_uses_config_length(capsys):
    main(["config", "set", "length", "11"])
    capsys.readouterr()
    main(["generate"])
    line = [l for l in capsys.readouterr().out.splitlines() if l.startswith("Password #")][0]
    assert len(line.split(": ", 1)[1]) == 11

def test_config_set_repairs_non_object_file():
    from passforms.config import config_path
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("[1, 2]")
    assert main(["config", "set", "length", "10"]) == EXIT_OK
    assert load_config()["length"] == 10

def test_generate_exhausted(capsys):
    assert main(["generate", "--length", "21"]) == EXIT_ERROR
    assert "GenerationExhausted" in capsys.readouterr().out
