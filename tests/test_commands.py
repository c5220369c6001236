import pytest

from desklaunch.commands import format_exec, split_command
from desklaunch.errors import CommandSyntaxError


def test_placeholders_are_removed_and_spacing_kept() -> None:
    assert format_exec("app %f --flag %U") == "app  --flag "


def test_all_five_placeholders_are_removed() -> None:
    assert format_exec("viewer %f%F%D%u%U") == "viewer "
    assert format_exec("open %u then %u") == "open  then "


def test_other_text_is_untouched() -> None:
    assert format_exec("app --icon %i --caption %c") == "app --icon %i --caption %c"
    assert format_exec('sh -c "echo hi"') == 'sh -c "echo hi"'


def test_split_command_honors_quotes() -> None:
    assert split_command('env FOO=1 "my app" --title \'a b\'') == ["env", "FOO=1", "my app", "--title", "a b"]


def test_split_command_tolerates_leftover_spacing() -> None:
    assert split_command(format_exec("app %f --flag %U")) == ["app", "--flag"]


def test_unbalanced_quotes_are_a_syntax_error() -> None:
    with pytest.raises(CommandSyntaxError):
        split_command('app "unterminated')


def test_empty_command_is_a_syntax_error() -> None:
    with pytest.raises(CommandSyntaxError):
        split_command("   ")


def test_null_byte_is_a_syntax_error() -> None:
    with pytest.raises(CommandSyntaxError):
        split_command("app\x00 --x")
