from labkit import proxy


def test_main_prints_user_agent(capsys):
    assert proxy.main() == 0
    out = capsys.readouterr().out
    assert out == (
        "User-Agent: Mozilla/5.0 (X11; Linux x86_64; rv:10.0.3) "
        "Gecko/20120305 Firefox/10.0.3\r\n"
    )


def test_user_agent_is_single_crlf_terminated_line(capsys):
    assert proxy.main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\r\n")
    assert out.count("\r\n") == 1
    assert out.startswith("User-Agent: ")