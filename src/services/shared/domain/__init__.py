from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    AuthenticationException as AuthenticationException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    ConflictException as ConflictException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .result import (
    AccessResult as AccessResult,
)
from .result import (
    Forbidden as Forbidden,
)
from .result import (
    Invalid as Invalid,
)
from .result import (
    NotFound as NotFound,
)
from .result import (
    Success as Success,
)
from .result import (
    Valid as Valid,
)
from .result import (
    ValidationResult as ValidationResult,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    EmailAddress as EmailAddress,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    TripId as TripId,
)
from .value_object import (
    UserId as UserId,
)
