from roster.services.auth import Authenticator, OperatorSession


def test_wrong_password_fails():
    outcome = Authenticator("admin", "admin123").attempt_login("admin", "wrong")
    assert not outcome.success
    assert outcome.message == "Invalid username or password"


def test_correct_credentials_succeed():
    outcome = Authenticator("admin", "admin123").attempt_login("admin", "admin123")
    assert outcome.success
    assert outcome.message is None


def test_comparison_is_verbatim():
    auth = Authenticator("admin", "admin123")
    assert not auth.attempt_login("Admin", "admin123").success
    assert not auth.attempt_login("admin ", "admin123").success
    assert not auth.attempt_login("admin", " admin123").success


def test_session_flag_follows_outcome():
    session = OperatorSession(Authenticator("admin", "admin123"))
    assert not session.authenticated

    session.login("admin", "wrong")
    assert not session.authenticated

    # unlimited attempts
    for _ in range(10):
        session.login("admin", "wrong")
    assert session.login("admin", "admin123").success
    assert session.authenticated

    # a later failed attempt does not log the operator out
    session.login("admin", "wrong")
    assert session.authenticated

    session.logout()
    assert not session.authenticated
