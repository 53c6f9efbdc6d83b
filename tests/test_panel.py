from carsim.panel import MAX_COMMANDS, PanelAction, PanelRequest, parse_commands


def commands_of(requests):
    return [request.command for request in requests]


def test_parses_simple_commands():
    assert commands_of(parse_commands("1 2 3")) == ["1", "2", "3"]


def test_repeated_spaces_are_skipped():
    assert commands_of(parse_commands("  4   5 ")) == ["4", "5"]


def test_newline_is_stripped():
    assert parse_commands("1\n") == [PanelRequest(PanelAction.COMMAND, "1")]


def test_only_first_character_counts():
    assert commands_of(parse_commands("12 34")) == ["1", "3"]


def test_stop_ends_the_line():
    assert parse_commands("1 0 2") == [
        PanelRequest(PanelAction.COMMAND, "1"),
        PanelRequest(PanelAction.STOP),
    ]


def test_pause_ends_the_line():
    assert parse_commands("7 1") == [PanelRequest(PanelAction.PAUSE)]


def test_token_count_is_limited():
    requests = parse_commands(" ".join(["3"] * 15))
    assert len(requests) == MAX_COMMANDS


def test_empty_line_gives_nothing():
    assert parse_commands("\n") == []