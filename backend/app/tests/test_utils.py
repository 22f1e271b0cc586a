from datetime import datetime, timedelta, timezone

from flask import Flask

from app.utils import err, now_utc, ok


def test_ok_and_err_responses():
    app = Flask(__name__)
    with app.app_context():
        ok_response, ok_status = ok({"value": 1}, status=201)
        err_response, err_status = err("bad", status=400)

    assert ok_status == 201
    assert ok_response.get_json() == {"ok": True, "value": 1}
    assert err_status == 400
    assert err_response.get_json() == {"ok": False, "error": "bad"}


def test_now_utc_is_recent_and_aware():
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    value = now_utc()
    after = datetime.now(timezone.utc) + timedelta(seconds=1)
    assert value.tzinfo is not None
    assert before <= value <= after
