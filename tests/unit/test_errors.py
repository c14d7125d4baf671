from logicon.errors import (
    ErrorCode,
    InvalidArgumentError,
    LogisticsError,
    StoreUnavailableError,
    USER_MESSAGES,
)


def test_all_error_codes_have_user_message():
    for code in ErrorCode:
        assert code in USER_MESSAGES


def test_user_message_lookup():
    err = LogisticsError("psycopg connection timeout", code=ErrorCode.STORE_UNAVAILABLE)
    assert err.user_message == "Logistics data is temporarily unavailable. Please try again later."


def test_subclasses_carry_default_codes():
    assert InvalidArgumentError("bad lat").code == ErrorCode.INVALID_ARGUMENT
    assert StoreUnavailableError("down").code == ErrorCode.STORE_UNAVAILABLE
    assert LogisticsError("boom").code == ErrorCode.INTERNAL_ERROR


def test_explicit_code_overrides_default():
    err = StoreUnavailableError("odd", code=ErrorCode.INTERNAL_ERROR)
    assert err.user_message == USER_MESSAGES[ErrorCode.INTERNAL_ERROR]


def test_user_message_never_exposes_internal_message():
    internal = "relation \"shipments\" does not exist"
    err = StoreUnavailableError(internal)
    assert internal not in err.user_message
    assert str(err) == internal
