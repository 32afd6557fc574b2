from ..extensions import db
from ..models.user import User
from ..models.profile import Profile


class EmailTakenError(ValueError):
    pass


def register_user(email, password, full_name=None):
    """Create a user together with its profile row."""
    email = (email or '').strip().lower()
    if User.query.filter_by(email=email).first():
        raise EmailTakenError(email)
    user = User(email=email)
    user.set_password(password)
    user.profile = Profile(full_name=(full_name or '').strip() or None)
    db.session.add(user)
    db.session.commit()
    return user


def authenticate(email, password):
    user = User.query.filter_by(email=(email or '').strip().lower()).first()
    if user and user.check_password(password):
        return user
    return None
