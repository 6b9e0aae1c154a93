import pytest

from vimbcore.ex_parse import (
    ExArg,
    ExCode,
    ExFlag,
    ExParseError,
    complete_command_names,
    parse_command_name,
    parse_ex,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("s", ExCode.SAVE),
        ("se", ExCode.SET),
        ("q", ExCode.QUIT),
        ("qp", ExCode.QPOP),
        ("qpu", ExCode.QPUSH),
        ("qun", ExCode.QUNSHIFT),
        ("e", ExCode.EVAL),
        ("h", ExCode.HARDCOPY),
        ("han", ExCode.HANDADD),
        ("handler-r", ExCode.HANDREM),
        ("au", ExCode.AUTOCMD),
        ("aug", ExCode.AUGROUP),
        ("no", ExCode.NORMAL),
        ("sh", ExCode.SHELLCMD),
        ("sho", ExCode.SCA),
        ("shortcut-d", ExCode.SCD),
        ("reg", ExCode.REG),
        ("t", ExCode.TABOPEN),
    ],
)
def test_abbreviations_resolve(text, expected):
    code, rest = parse_command_name(text)
    assert code is expected
    assert rest == ""


def test_full_names_resolve_to_themselves():
    for code in ExCode:
        assert parse_command_name(code.command) == (code, "")


def test_name_stops_at_space_and_bang():
    assert parse_command_name("set foo") == (ExCode.SET, " foo")
    assert parse_command_name("q!") == (ExCode.QUIT, "!")


def test_unknown_command_reports_word():
    with pytest.raises(ExParseError) as info:
        parse_command_name("foo bar")
    assert info.value.word == "foo"
    assert str(info.value) == "Unknown command: foo"


def test_overlong_name_is_unknown():
    with pytest.raises(ExParseError) as info:
        parse_command_name("quitx")
    assert info.value.word == "quitx"


def test_empty_name_is_unknown():
    with pytest.raises(ExParseError):
        parse_command_name("")


def test_parse_set_command():
    args = list(parse_ex("set foo=bar"))
    assert len(args) == 1
    assert args[0].code is ExCode.SET
    assert args[0].rhs == "foo=bar"
    assert args[0].nohist is False
    assert args[0].name == "set"
    assert args[0].flags == ExFlag.RHS


def test_leading_colon_sets_nohist():
    (arg,) = parse_ex(":set x")
    assert arg.nohist is True
    assert arg.rhs == "x"


def test_count_is_parsed():
    (arg,) = parse_ex("12open url")
    assert arg.code is ExCode.OPEN
    assert arg.count == 12
    assert arg.rhs == "url"


def test_bang_only_for_bang_commands():
    (quit_arg,) = parse_ex("quit!")
    assert quit_arg.bang is True
    (set_arg,) = parse_ex("set!")
    assert set_arg.bang is False
    assert set_arg.rhs == "!"


def test_lhs_escaped_space():
    (arg,) = parse_ex(r"nmap a\ b :open")
    assert arg.code is ExCode.NMAP
    assert arg.lhs == "a b"
    assert arg.rhs == ":open"


def test_lhs_escaped_backslash_and_other_chars():
    (arg,) = parse_ex(r"nmap a\\b x")
    assert arg.lhs == "a\\b"
    (arg,) = parse_ex(r"nmap a\x y")
    assert arg.lhs == r"a\x"
    assert arg.rhs == "y"


def test_trailing_backslash_in_lhs_is_kept():
    (arg,) = parse_ex("cunmap a\\")
    assert arg.lhs == "a\\"


def test_rhs_commands_split_on_bar():
    args = list(parse_ex("set a=1|set b=2"))
    assert [a.rhs for a in args] == ["a=1", "b=2"]
    assert all(a.code is ExCode.SET for a in args)


def test_cmd_commands_keep_bar():
    (arg,) = parse_ex("open a|b")
    assert arg.rhs == "a|b"


def test_newline_separates_cmd_commands():
    args = list(parse_ex("open a\ntabopen b"))
    assert [(a.code, a.rhs) for a in args] == [(ExCode.OPEN, "a"), (ExCode.TABOPEN, "b")]


def test_parsing_is_lazy_and_stops_on_unknown():
    gen = parse_ex("quit foo")
    first = next(gen)
    assert first.code is ExCode.QUIT
    with pytest.raises(ExParseError):
        next(gen)


def test_error_carries_nohist():
    with pytest.raises(ExParseError) as info:
        list(parse_ex(":bogus"))
    assert info.value.nohist is True


def test_empty_input_yields_nothing():
    assert list(parse_ex("")) == []


def test_exarg_defaults():
    arg = ExArg(ExCode.HARDCOPY)
    assert (arg.count, arg.bang, arg.lhs, arg.rhs) == (0, False, "", "")
    assert arg.flags == ExFlag.NONE


def test_complete_command_names_prefix():
    assert complete_command_names("sh") == [
        "shellcmd",
        "shortcut-add",
        "shortcut-default",
        "shortcut-remove",
    ]


def test_complete_all_names_in_table_order():
    names = complete_command_names("")
    assert names == [code.command for code in ExCode]
    assert all(name.startswith("q") for name in complete_command_names("q"))
    assert complete_command_names("zzz") == []