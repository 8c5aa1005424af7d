from .entity import User as User
from .factory import UserFactory as UserFactory
from .repository import UserRepository as UserRepository
from .service import PasswordHasher as PasswordHasher
