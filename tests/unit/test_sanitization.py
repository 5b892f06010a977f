from utils.logger import sanitize_log_data


def test_password_redaction():
    data = {"email": "user@example.com", "password": "supersecret123"}
    sanitized = sanitize_log_data(data)

    assert sanitized["email"] == "user@example.com"
    assert sanitized["password"] == "***REDACTED***"


def test_token_partial_redaction():
    data = {"access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.long_token_here"}
    sanitized = sanitize_log_data(data)

    assert sanitized["access_token"] == data["access_token"][:8] + "..."


def test_nested_dict_sanitization():
    data = {"order": {"delivery_address": "Rua A", "authorization": "Bearer abc"}}
    sanitized = sanitize_log_data(data)

    assert sanitized["order"]["delivery_address"] == "Rua A"
    assert sanitized["order"]["authorization"] == "***REDACTED***"
    # input left untouched
    assert data["order"]["authorization"] == "Bearer abc"


def test_non_sensitive_data_unchanged():
    data = {"order_id": 12, "establishment_id": 3, "total": "54.80"}

    assert sanitize_log_data(data) == data
