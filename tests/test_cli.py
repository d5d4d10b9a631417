import json

import pytest

import cat2seq


@pytest.fixture
def catalog_file(tmp_path, scenario_csv):
    path = tmp_path / "catalog.csv"
    path.write_text(scenario_csv, encoding="utf-8")
    return str(path)


def run(argv):
    with pytest.raises(SystemExit) as exc:
        cat2seq.main(argv)
    return exc.value.code


def test_stdout_json(catalog_file, capsys):
    cat2seq.main(["-i", catalog_file, "-s", "--start-year", "2023", "--max-courses", "3"])
    out = json.loads(capsys.readouterr().out)

    assert out["meta"] == {
        "include_summer": False,
        "starting_year": 2023,
        "starting_semester": "Fall",
        "max_courses_per_term": 3,
    }
    assert [(t["season"], t["year"]) for t in out["terms"]] == [
        ("Fall", 2023), ("Winter", 2024),
    ]


def test_missing_output_format(catalog_file, capsys):
    assert run(["-i", catalog_file]) == 1
    assert "izlazni format" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert run(["-i", str(tmp_path / "nema.csv"), "-s"]) == 1
    assert "nije pronadjen" in capsys.readouterr().err


def test_invalid_catalog_row(tmp_path, capsys):
    path = tmp_path / "catalog.csv"
    path.write_text("Subject,Catalog,Name,Prerequisites,Winter,Summer,Fall\n"
                    "CSI,1111,Intro,CSI 1110 or,true,true,true\n", encoding="utf-8")
    assert run(["-i", str(path), "-s"]) == 1
    assert "Red 2" in capsys.readouterr().err


def test_skip_invalid_warns(tmp_path, scenario_csv, capsys):
    path = tmp_path / "catalog.csv"
    path.write_text(scenario_csv + "SEG,2105,Bad,CSI 1111 or,true,true,true\n",
                    encoding="utf-8")
    cat2seq.main(["-i", str(path), "-s", "--skip-invalid", "--start-year", "2023"])
    captured = capsys.readouterr()
    assert "Upozorenje (red 6)" in captured.err
    assert "SEG" not in captured.out


def test_validation_error_exits(tmp_path, capsys):
    path = tmp_path / "catalog.csv"
    path.write_text("Subject,Catalog,Name,Prerequisites,Winter,Summer,Fall\n"
                    "CSI,1111,Intro,,false,true,false\n", encoding="utf-8")
    assert run(["-i", str(path), "-s"]) == 1
    assert "Greska: CSI 1111" in capsys.readouterr().err

    # Sa ljetnim semestrom isti katalog prolazi
    cat2seq.main(["-i", str(path), "-s", "--include-summer", "--start-year", "2023"])
    out = json.loads(capsys.readouterr().out)
    assert out["terms"][-1]["season"] == "Summer"


def test_config_file_and_override(tmp_path, catalog_file, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({
        "include_summer": True,
        "starting_semester": "Winter",
        "starting_year": 2030,
        "max_courses_per_term": 1,
    }), encoding="utf-8")

    cat2seq.main(["-i", catalog_file, "-c", str(config), "-s", "--start-year", "2031"])
    out = json.loads(capsys.readouterr().out)
    assert out["meta"]["starting_year"] == 2031
    assert out["meta"]["starting_semester"] == "Winter"
    assert out["meta"]["include_summer"] is True
    assert all(len(t["courses"]) <= 1 for t in out["terms"])


def test_bad_config_value(catalog_file, capsys):
    assert run(["-i", catalog_file, "-s", "--start-season", "Spring"]) == 1
    assert "konfiguraciji" in capsys.readouterr().err


def test_json_and_markdown_files(tmp_path, catalog_file, capsys):
    json_path = tmp_path / "plan.json"
    md_path = tmp_path / "plan.md"
    cat2seq.main(["-i", catalog_file, "-j", str(json_path), "-m", str(md_path),
                  "--title", "Moj plan", "--start-year", "2023"])

    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data["terms"][0]["season"] == "Fall"
    assert md_path.read_text(encoding="utf-8").startswith("# Moj plan")
    err = capsys.readouterr().err
    assert "Generisan JSON" in err
    assert "Generisan Markdown" in err


def test_plain_text_output(catalog_file, capsys):
    cat2seq.main(["-i", catalog_file, "-p", "--start-year", "2023"])
    out = capsys.readouterr().out
    assert out.startswith("Term: Fall 2023\nCSI 1111: Intro to computing")
    assert "Term: Winter 2024\nCSI 1112: Computing II" in out


def test_ast_output(catalog_file, capsys):
    cat2seq.main(["-i", catalog_file, "-a"])
    out = capsys.readouterr().out
    assert "=== STABLA PREDUSLOVA ===" in out
    assert "CSI 1112 [Summer, Fall, Winter]" in out
    assert "CourseNode(subject_code='CSI', catalog_code=1111)" in out
