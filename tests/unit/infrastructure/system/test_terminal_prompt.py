from dirpasswd.infrastructure.system.prompt import TerminalSecretPrompt


class TestTerminalSecretPrompt:
    def test_returns_secret_for_typed_value(self):
        labels = []

        def reader(label):
            labels.append(label)
            return "Sn0wman!"

        secret = TerminalSecretPrompt(reader=reader).prompt("New password:")

        assert labels == ["New password:"]
        assert secret.reveal() == "Sn0wman!"

    def test_empty_entry_is_an_empty_secret(self):
        secret = TerminalSecretPrompt(reader=lambda label: "").prompt("New password:")

        assert secret is not None
        assert secret.is_empty()

    def test_end_of_input_returns_none(self):
        def reader(label):
            raise EOFError

        assert TerminalSecretPrompt(reader=reader).prompt("Retype new password:") is None
