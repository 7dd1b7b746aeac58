from jose import jwt

from liftlog.security import create_access_token, decode_token, owner_id_from_token
from liftlog.settings import get_settings


def test_token_expired(client):
    expired = create_access_token("user_x", expires_minutes=-1)
    r = client.get("/workouts", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"


def test_token_wrong_secret(client):
    forged = jwt.encode({"sub": "user_x", "exp": 4102444800}, "not-the-secret", algorithm="HS256")
    r = client.get("/workouts", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == "Bearer"


def test_token_without_subject(client):
    blank = create_access_token("   ")
    r = client.get("/workouts", headers={"Authorization": f"Bearer {blank}"})
    assert r.status_code == 401


def test_token_without_exp_is_rejected():
    s = get_settings()
    tok = jwt.encode({"sub": "user_x"}, s.SECRET_KEY, algorithm=s.ALGORITHM)
    try:
        decode_token(tok)
    except Exception as e:
        assert "exp" in str(e).lower()
    else:
        raise AssertionError("token without exp accepted")


def test_owner_id_is_opaque_subject():
    assert owner_id_from_token(create_access_token("user_2abcDEF")) == "user_2abcDEF"
