from .domain import Domain, load, dump, field
from .observable import (
    CompleteFunction,
    ErrorFunction,
    EventHandlers,
    NextFunction,
    Observable,
    Observer,
    Strategy,
    Subscription,
    Teardown,
)
