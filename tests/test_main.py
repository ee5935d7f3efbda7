"""
Tests for the demo entry point.
"""

from damage_engine.main import main


def test_list_presets(capsys):
    assert main(["--list"]) == 0
    assert "Magic Missile" in capsys.readouterr().out


def test_roll_preset(capsys):
    assert main(["fireball", "--critical", "--method", "half"]) == 0
    output = capsys.readouterr().out
    assert "Fireball" in output
    assert "Stone Golem" in output


def test_unknown_preset(capsys):
    assert main(["vorpal-sword"]) == 1
    assert "Unknown preset" in capsys.readouterr().out


def test_modifier_out_of_range(capsys):
    assert main(["dagger", "--modifier", "5000"]) == 1
    assert "DAMAGE_CALCULATION_LIMIT" in capsys.readouterr().out
