from automate_api.infra.console import prompter as prompter_module
from automate_api.infra.console.prompter import ConsolePrompter


def test_credential_prompts_until_username_given(monkeypatch):
    answers = iter(["", "  ", "admin"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    monkeypatch.setattr(prompter_module.getpass, "getpass", lambda prompt: "s3cret")

    credential = ConsolePrompter().credential()

    assert credential.username == "admin"
    assert credential.password.get_secret_value() == "s3cret"


def test_server_and_code_read_from_input(monkeypatch):
    answers = iter(["host.example.com", "123 456"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    console = ConsolePrompter()

    assert console.server() == "host.example.com"
    assert console.two_factor_code() == "123 456"


def test_notify_prints(capsys):
    ConsolePrompter().notify("Token retrieved")

    assert capsys.readouterr().out == "Token retrieved\n"
