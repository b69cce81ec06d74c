from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    IntegrityFaultException as IntegrityFaultException,
)
from .exceptions import (
    LockTimeoutException as LockTimeoutException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
