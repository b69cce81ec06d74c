from .exceptions import (
    FareTypeNotAvailableException as FareTypeNotAvailableException,
)
from .exceptions import (
    FlightTypeMismatchException as FlightTypeMismatchException,
)
from .exceptions import (
    GroupDiscountMinimumNotMetException as GroupDiscountMinimumNotMetException,
)
from .exceptions import (
    InsufficientSeatsException as InsufficientSeatsException,
)
from .exceptions import (
    LadiesDiscountGenderViolationException as LadiesDiscountGenderViolationException,
)
from .exceptions import (
    OutOfReservablePeriodException as OutOfReservablePeriodException,
)
from .exceptions import (
    PassengerIdentityMismatchException as PassengerIdentityMismatchException,
)
from .exceptions import (
    PassengerMemberNotFoundException as PassengerMemberNotFoundException,
)
from .exceptions import (
    RepresentativeIdentityMismatchException as RepresentativeIdentityMismatchException,
)
from .exceptions import (
    RepresentativeMemberNotFoundException as RepresentativeMemberNotFoundException,
)
from .exceptions import (
    RepresentativeTooYoungException as RepresentativeTooYoungException,
)
from .exceptions import (
    ReturnFlightTooEarlyException as ReturnFlightTooEarlyException,
)
