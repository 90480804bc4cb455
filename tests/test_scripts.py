from scripts import alias, basic, for_loop, strings


def test_basic(capsys):
    basic.main()
    assert capsys.readouterr().out == "5 10 20\n"


def test_strings(capsys):
    strings.main()
    assert capsys.readouterr().out.splitlines() == [
        "Alice Bob Carol",
        "Removed Alice",
        "Bob Carol",
    ]


def test_alias(capsys):
    alias.main()
    assert capsys.readouterr().out == "[1][2][3]\n"


def test_for_loop(capsys):
    for_loop.main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["By value: 1", "By value: 2", "By value: 3"]
    assert lines[3:6] == ["By reference: 1", "By reference: 2", "By reference: 3"]
    assert lines[6:] == [
        "Updated in place: 10",
        "Updated in place: 20",
        "Updated in place: 30",
    ]
