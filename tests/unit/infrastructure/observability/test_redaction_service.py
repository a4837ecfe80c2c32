from gitlab_provisioner.infrastructure.observability import redact_dict, redact_event, redact_text


def test_redacts_gitlab_tokens_in_text():
    text = "GET /api/v4/projects?private_token=abc123 with PRIVATE-TOKEN: glpat-xxxxxxxxxxxx"

    redacted = redact_text(text)

    assert "abc123" not in redacted
    assert "glpat-xxxxxxxxxxxx" not in redacted
    assert "[REDACTED]" in redacted


def test_redacts_sensitive_keys_recursively():
    data = {"headers": {"PRIVATE-TOKEN": "glpat-secret"}, "project": "group/app", "items": ["Bearer abc.def"]}

    redacted = redact_dict(data)

    assert redacted["headers"]["PRIVATE-TOKEN"] == "[REDACTED]"
    assert redacted["project"] == "group/app"
    assert redacted["items"] == ["Bearer [REDACTED]"]


def test_redact_event_masks_fields_but_keeps_internal_keys():
    record = object()
    event = {
        "event": "calling https://gitlab.example.com?private_token=abc123",
        "private_token": "glpat-abcdefghijkl",
        "config": {"project": "group/app", "api_key": "k"},
        "_record": record,
    }

    result = redact_event(None, "info", event)

    assert result is event
    assert event["event"] == "calling https://gitlab.example.com?private_token=[REDACTED]"
    assert event["private_token"] == "[REDACTED]"
    assert event["config"] == {"project": "group/app", "api_key": "[REDACTED]"}
    assert event["_record"] is record
