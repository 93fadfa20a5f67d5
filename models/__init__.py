from .db import db
from .user import User
from .ip_history import IpHistory
