from arachnopod.cvs import CVS, main
from arachnopod.ds import DSModule
from arachnopod.ses import SESModule


def test_initialize_registers_modules():
    cvs = CVS()
    cvs.initialize()
    assert sorted(cvs.manager.modules) == ["DS", "SES"]
    assert isinstance(cvs.manager.modules["SES"], SESModule)
    assert isinstance(cvs.manager.modules["DS"], DSModule)


def test_first_tick_enables_power(capsys):
    cvs = CVS()
    cvs.initialize()
    cvs.main_loop(iterations=1, interval=0)
    assert cvs.manager.modules["SES"].status() == "ACTIVE"
    assert capsys.readouterr().out == "SES: power enabled for DS\n"


def test_power_enabled_only_once(capsys):
    cvs = CVS()
    cvs.initialize()
    cvs.main_loop(iterations=3, interval=0)
    assert capsys.readouterr().out.count("power enabled") == 1


def test_zero_iterations_does_nothing():
    cvs = CVS()
    cvs.initialize()
    cvs.main_loop(iterations=0, interval=0)
    assert cvs.manager.modules["SES"].status() == "UNKNOWN"


def test_main_runs_given_iterations(capsys):
    assert main(["--iterations", "2", "--interval", "0"]) == 0
    assert capsys.readouterr().out == "SES: power enabled for DS\n"