from .user import User
from .profile import Profile
from .transcript import Transcript
from .insight import Insight
# base and mixins are imported by the above as needed
