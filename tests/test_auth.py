import pytest

from conftest import PASSWORD
from research_assistant.models import Profile, User
from research_assistant.services.accounts import EmailTakenError, register_user


def test_register_creates_exactly_one_profile(app):
    user = register_user('New@Example.com', 'secret12', 'New Person')
    assert user.email == 'new@example.com'
    profiles = Profile.query.filter_by(user_id=user.id).all()
    assert len(profiles) == 1
    assert profiles[0].full_name == 'New Person'


def test_duplicate_email_rejected(app, user):
    with pytest.raises(EmailTakenError):
        register_user(user.email, 'another1')
    assert User.query.count() == 1


def test_signup_then_login(client, app):
    resp = client.post('/auth/signup', data={
        'full_name': 'Grace', 'email': 'grace@example.com',
        'password': 'secret12', 'confirm': 'secret12',
    })
    assert resp.status_code == 302
    assert Profile.query.count() == 1

    resp = client.post('/auth/login', data={'email': 'grace@example.com', 'password': 'secret12'})
    assert resp.status_code == 302
    assert client.get('/').status_code == 200


def test_bad_password(client, user):
    resp = client.post('/auth/login', data={'email': user.email, 'password': 'wrong'})
    assert resp.status_code == 200
    assert b'Invalid credentials' in resp.data


def test_profile_update(logged_in, user):
    resp = logged_in.post('/auth/profile', data={'full_name': 'Ada', 'company': 'Acme Capital', 'role': 'Partner'})
    assert resp.status_code == 302
    profile = Profile.query.filter_by(user_id=user.id).one()
    assert (profile.full_name, profile.company, profile.role) == ('Ada', 'Acme Capital', 'Partner')


def test_logout(logged_in):
    resp = logged_in.post('/auth/logout')
    assert resp.status_code == 302
    assert '/auth/login' in logged_in.get('/').headers['Location']
