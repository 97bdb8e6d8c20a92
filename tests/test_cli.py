from zsw.cli import main


def test_modify_creates_backup_and_modifies(train_dir):
    assert main(["modify", str(train_dir), "-m", "0.5", "--seed", "1"]) == 0
    assert (train_dir.with_name("Fahrplan_zsw") / "RB_1.trn").exists()
    assert 'APBeschl="0.75"' in (train_dir / "RB_1.trn").read_text(encoding="utf-8")


def test_modify_no_copy(train_dir):
    assert main(["m", str(train_dir), "-m", "0.5", "-n"]) == 0
    assert not train_dir.with_name("Fahrplan_zsw").exists()


def test_modify_then_reset(train_dir):
    original = (train_dir / "RB_1.trn").read_text(encoding="utf-8")
    assert main(["modify", str(train_dir), "--friction", "0.1", "--departures-delay-factor", "1.5"]) == 0
    assert (train_dir / "RB_1.trn").read_text(encoding="utf-8") != original
    assert main(["reset", str(train_dir)]) == 0
    assert (train_dir / "RB_1.trn").read_text(encoding="utf-8") == original


def test_per_file_failure_is_not_fatal(train_dir):
    (train_dir / "RB_0.trn").write_text("kaputt", encoding="utf-8")
    assert main(["modify", str(train_dir), "-m", "0.5", "-n"]) == 0


def test_directory_errors_are_fatal(tmp_path):
    assert main(["modify", str(tmp_path / "missing"), "-m", "0.5"]) == 1
    assert main(["reset", str(tmp_path / "missing")]) == 1


def test_invalid_configuration(train_dir):
    assert main(["modify", str(train_dir), "--delay-probability", "2", "-n"]) == 1
    assert main(["modify", str(train_dir), "--ambient-mean", "1", "--ambient-deviation", "0", "-n"]) == 1
