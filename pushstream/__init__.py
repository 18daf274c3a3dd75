from .domain import (
    SomethingWentWrong,
    InvalidPayload,
    SerializationFail,
    HttpMethod,
    HttpStatus,
    User,
    HttpRequest,
    HttpResponse,
    load_request,
)
from .shared import (
    EventHandlers,
    Observable,
    Observer,
    Subscription,
)
from .handlers import (
    handle_request,
    handle_error,
    handle_complete,
    default_handlers,
)
from .serializers import (
    JSONSerializer,
    DefaultSerializer,
)
