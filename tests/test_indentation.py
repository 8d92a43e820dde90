from sparkfmt.formatter import Indentation, IndentKind, OneShotFlag


def test_one_shot_flag_is_consumed_by_one_read() -> None:
    flag = OneShotFlag()
    assert flag.consume() is False

    flag.arm_once()
    flag.arm_once()

    assert flag.is_armed
    assert flag.consume() is True
    assert flag.consume() is False
    assert not flag.is_armed


def test_indent_string_repeats_unit_per_level() -> None:
    indentation = Indentation("  ")
    assert indentation.get_indent() == ""

    indentation.increase_top_level()
    indentation.increase_block_level()

    assert indentation.depth == 2
    assert indentation.get_indent() == "    "


def test_custom_indent_unit() -> None:
    indentation = Indentation("\t")
    indentation.increase_block_level()

    assert indentation.get_indent() == "\t"


def test_decrease_top_level_only_pops_top_level() -> None:
    indentation = Indentation()
    indentation.increase_top_level()
    indentation.increase_block_level()

    indentation.decrease_top_level()

    assert indentation.kinds == (IndentKind.TOP_LEVEL, IndentKind.BLOCK_LEVEL)


def test_decrease_block_level_also_closes_clauses_inside_it() -> None:
    indentation = Indentation()
    indentation.increase_top_level()
    indentation.increase_block_level()
    indentation.increase_top_level()
    indentation.increase_top_level()

    indentation.decrease_block_level()

    assert indentation.kinds == (IndentKind.TOP_LEVEL,)


def test_decrease_on_empty_stack_is_a_no_op() -> None:
    indentation = Indentation()

    indentation.decrease_block_level()
    indentation.decrease_top_level()

    assert indentation.depth == 0
    assert indentation.get_indent() == ""


def test_decrease_block_level_without_block_empties_stack() -> None:
    indentation = Indentation()
    indentation.increase_top_level()
    indentation.increase_top_level()

    indentation.decrease_block_level()

    assert indentation.depth == 0


def test_trim_end_suppression_lasts_one_read() -> None:
    indentation = Indentation()
    assert indentation.should_trim_end() is True

    indentation.suppress_trim_end()

    assert indentation.should_trim_end() is False
    assert indentation.should_trim_end() is True


def test_newline_suppression_lasts_one_read() -> None:
    indentation = Indentation()
    assert indentation.should_start_newline() is True

    indentation.suppress_next_newline()

    assert indentation.should_start_newline() is False
    assert indentation.should_start_newline() is True


def test_whitespace_toggle_is_persistent() -> None:
    indentation = Indentation()
    assert indentation.whitespace_enabled is True

    indentation.set_whitespace(False)

    assert indentation.whitespace_enabled is False
    assert indentation.whitespace_enabled is False

    indentation.set_whitespace(True)
    assert indentation.whitespace_enabled is True
