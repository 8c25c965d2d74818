from failchain import Info, Message, StringCode, format_error, new, wrap

A = StringCode("A")


def test_format_error_plain_matches_str() -> None:
    err = new(A, Message("m"))
    assert format_error(err) == str(err)
    assert format_error(None) == ""


def test_format_error_verbose_lists_info_and_frames() -> None:
    err = wrap(new(A, Info(path="/etc/app.toml")), Info(attempt=2))
    lines = format_error(err, verbose=True).splitlines()

    assert lines[0] == str(err)
    assert lines[1:3] == ["    attempt = 2", "    path = /etc/app.toml"]
    assert lines[3] == "    [CallStack]"
    assert lines[4].startswith(
        f"    [{__name__}.test_format_error_verbose_lists_info_and_frames] "
    )


def test_format_error_verbose_foreign_error() -> None:
    assert format_error(ValueError("boom"), verbose=True) == "boom"
