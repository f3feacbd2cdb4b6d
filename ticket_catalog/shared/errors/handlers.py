"""
Centralized error handlers for FastAPI.

Every exception that reaches the web boundary goes through
``build_problem``, a single dispatch over the exception type that
yields the problem type, the caller-facing detail and the log severity.
``handle_exception`` logs the outcome once and renders it as an
``application/problem+json`` response.

No stack traces or internal details are exposed to clients:
internal errors and integrity violations only reach the logs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from ticket_catalog.core.config import Settings, settings as default_settings
from ticket_catalog.domain.catalog.errors import (
    BusinessRuleViolationError,
    CatalogDomainError,
    ConflictError,
    ResourceNotFoundError,
)
from ticket_catalog.shared.context import get_trace_id, get_user_id
from ticket_catalog.shared.errors.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    BadCredentialsError,
    DisabledAccountError,
    LockedAccountError,
    UnsupportedMediaTypeError,
)
from ticket_catalog.shared.errors.messages import (
    describe_integrity_violation,
    describe_unreadable_body,
    extract_field_name,
)
from ticket_catalog.shared.errors.problem_details import (
    PROBLEM_JSON_MEDIA_TYPE,
    FieldViolation,
    ProblemDetails,
    ProblemType,
)

logger = logging.getLogger(__name__)

VALIDATION_DETAIL = (
    "One or more validation errors occurred. "
    "Please check the 'errors' field for details."
)
CONSTRAINT_DETAIL = "Request parameters or path variables failed validation."
BAD_CREDENTIALS_DETAIL = (
    "Invalid credentials. Please check your credentials and try again."
)
ACCOUNT_DISABLED_DETAIL = (
    "Your account has been disabled. Please contact support for assistance."
)
ACCOUNT_LOCKED_DETAIL = (
    "Your account has been locked due to too many failed attempts. "
    "Please try again later or contact support."
)
ACCESS_DENIED_DETAIL = "You do not have permission to access this resource."
INTERNAL_ERROR_DETAIL = (
    "An unexpected error occurred. Please try again later "
    "or contact support if the problem persists."
)

_PARAMETER_LOCATIONS = ("path", "query", "header", "cookie")

# Status of an HTTPException raised outside routing -> problem type.
_HTTP_STATUS_TYPES: dict[int, ProblemType] = {
    400: ProblemType.MALFORMED_REQUEST,
    401: ProblemType.AUTHENTICATION_REQUIRED,
    403: ProblemType.ACCESS_DENIED,
    404: ProblemType.ENDPOINT_NOT_FOUND,
    405: ProblemType.METHOD_NOT_ALLOWED,
    409: ProblemType.CONFLICT,
    415: ProblemType.UNSUPPORTED_MEDIA_TYPE,
    422: ProblemType.BUSINESS_RULE_VIOLATION,
    429: ProblemType.RATE_LIMIT_EXCEEDED,
}


@dataclass
class Problem:
    """An exception translated for the caller and for the logs."""

    problem_type: ProblemType
    detail: str
    log_level: int
    log_message: str
    errors: Optional[list[FieldViolation]] = None
    type_slug: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)
    with_traceback: bool = False

    @property
    def slug(self) -> str:
        return self.type_slug or self.problem_type.slug


# ------------------------------------------------------------------
# Translation
# ------------------------------------------------------------------


def build_problem(request: Request, exc: Exception) -> Problem:
    """Translate ``exc`` into a Problem.

    Branches are ordered from the most specific exception type to the
    catch-all, so subclasses are matched before their bases.
    """
    if isinstance(exc, RequestValidationError):
        return _from_validation_error(request, exc)

    if isinstance(exc, ResourceNotFoundError):
        return Problem(ProblemType.RESOURCE_NOT_FOUND, exc.message, logging.INFO, exc.message)

    # RateLimitExceeded subclasses HTTPException.
    if isinstance(exc, RateLimitExceeded):
        detail = f"Rate limit exceeded: {exc.detail}"
        return Problem(ProblemType.RATE_LIMIT_EXCEEDED, detail, logging.WARNING, detail)

    if isinstance(exc, StarletteHTTPException):
        return _from_http_exception(request, exc)

    if isinstance(exc, UnsupportedMediaTypeError):
        detail = (
            f"Content type '{exc.content_type}' is not supported. "
            f"Supported types: {', '.join(exc.supported)}"
        )
        return Problem(ProblemType.UNSUPPORTED_MEDIA_TYPE, detail, logging.WARNING, detail)

    if isinstance(exc, ConflictError):
        return Problem(ProblemType.CONFLICT, exc.message, logging.WARNING, exc.message)

    if isinstance(exc, BusinessRuleViolationError):
        slug = (
            f"business-rule/{exc.rule_code}"
            if exc.rule_code
            else ProblemType.BUSINESS_RULE_VIOLATION.slug
        )
        return Problem(
            ProblemType.BUSINESS_RULE_VIOLATION,
            exc.message,
            logging.WARNING,
            f"Rule: {exc.rule_code}, Message: {exc.message}",
            type_slug=slug,
        )

    if isinstance(exc, IntegrityError):
        raw_message = str(exc.orig) if exc.orig is not None else str(exc)
        return Problem(
            ProblemType.DATA_INTEGRITY_VIOLATION,
            describe_integrity_violation(raw_message),
            logging.ERROR,
            raw_message,
            with_traceback=True,
        )

    if isinstance(exc, BadCredentialsError):
        return Problem(
            ProblemType.AUTHENTICATION_FAILED,
            BAD_CREDENTIALS_DETAIL,
            logging.WARNING,
            "Bad credentials attempt",
        )

    if isinstance(exc, DisabledAccountError):
        return Problem(
            ProblemType.ACCOUNT_DISABLED,
            ACCOUNT_DISABLED_DETAIL,
            logging.WARNING,
            "Disabled account access attempt",
        )

    if isinstance(exc, LockedAccountError):
        return Problem(
            ProblemType.ACCOUNT_LOCKED,
            ACCOUNT_LOCKED_DETAIL,
            logging.WARNING,
            "Locked account access attempt",
        )

    if isinstance(exc, AuthenticationError):
        return Problem(
            ProblemType.AUTHENTICATION_REQUIRED,
            exc.message,
            logging.WARNING,
            exc.message,
        )

    if isinstance(exc, AccessDeniedError):
        return Problem(
            ProblemType.ACCESS_DENIED,
            ACCESS_DENIED_DETAIL,
            logging.WARNING,
            f"User '{get_user_id()}' denied access ({exc.permission})",
        )

    if isinstance(exc, ValueError):
        message = str(exc)
        return Problem(ProblemType.INVALID_ARGUMENT, message, logging.WARNING, message)

    return Problem(
        ProblemType.INTERNAL_ERROR,
        INTERNAL_ERROR_DETAIL,
        logging.ERROR,
        f"{type(exc).__name__}: {exc}",
        with_traceback=True,
    )


def _from_validation_error(request: Request, exc: RequestValidationError) -> Problem:
    """Split FastAPI validation errors into the request-input categories."""
    errors = list(exc.errors())
    param_errors = [e for e in errors if _location(e) in _PARAMETER_LOCATIONS]

    if param_errors:
        for error in param_errors:
            if error.get("type") == "missing":
                name = str(error["loc"][-1])
                declared = _declared_type(request, _location(error), name)
                detail = f"Required parameter '{name}' of type '{declared}' is missing."
                return Problem(
                    ProblemType.MISSING_PARAMETER,
                    detail,
                    logging.WARNING,
                    f"Missing parameter: {name}",
                )
        for error in param_errors:
            error_type = str(error.get("type", ""))
            if error_type.endswith("_parsing"):
                name = str(error["loc"][-1])
                expected = error_type.partition("_")[0]
                value = error.get("input")
                detail = (
                    f"Parameter '{name}' with value '{value}' "
                    f"could not be converted to type '{expected}'."
                )
                return Problem(
                    ProblemType.TYPE_MISMATCH,
                    detail,
                    logging.WARNING,
                    f"Parameter '{name}' expected type '{expected}', got '{value}'",
                )
        # Body field errors raised alongside are reported in the same list.
        violations = [
            FieldViolation(
                field=extract_field_name(".".join(str(part) for part in e["loc"])),
                rejected_value=e.get("input"),
                message=e.get("msg", "Invalid value"),
                code=e.get("type", "value_error"),
            )
            for e in param_errors
        ] + [
            _body_violation(e)
            for e in errors
            if _location(e) == "body" and not _is_unreadable(e)
        ]
        return Problem(
            ProblemType.CONSTRAINT_VIOLATION,
            CONSTRAINT_DETAIL,
            logging.WARNING,
            _summarize(violations),
            errors=violations,
        )

    unreadable = next((e for e in errors if _is_unreadable(e)), None)
    if unreadable is not None:
        detail = describe_unreadable_body(_parser_message(unreadable))
        return Problem(ProblemType.MALFORMED_REQUEST, detail, logging.WARNING, detail)

    violations = [_body_violation(e) for e in errors]
    return Problem(
        ProblemType.VALIDATION_ERROR,
        VALIDATION_DETAIL,
        logging.WARNING,
        f"{len(violations)} validation errors: {_summarize(violations)}",
        errors=violations,
    )


def _from_http_exception(request: Request, exc: StarletteHTTPException) -> Problem:
    if exc.status_code == 404:
        detail = f"No handler found for {request.method} {request.url}"
        return Problem(ProblemType.ENDPOINT_NOT_FOUND, detail, logging.WARNING, detail)

    if exc.status_code == 405:
        allowed = _allowed_methods(request, exc)
        detail = (
            f"HTTP method '{request.method}' is not supported for this endpoint. "
            f"Supported methods: {', '.join(allowed)}"
        )
        return Problem(
            ProblemType.METHOD_NOT_ALLOWED,
            detail,
            logging.WARNING,
            detail,
            headers={"Allow": ", ".join(allowed)},
        )

    problem_type = _HTTP_STATUS_TYPES.get(exc.status_code, ProblemType.INTERNAL_ERROR)
    if problem_type is ProblemType.INTERNAL_ERROR:
        return Problem(
            problem_type,
            INTERNAL_ERROR_DETAIL,
            logging.ERROR,
            f"HTTP {exc.status_code}: {exc.detail}",
        )
    detail = str(exc.detail)
    if problem_type is ProblemType.MALFORMED_REQUEST:
        detail = describe_unreadable_body(detail)
    return Problem(
        problem_type,
        detail,
        logging.WARNING,
        str(exc.detail),
        headers=dict(exc.headers or {}),
    )


def _is_unreadable(error: dict[str, Any]) -> bool:
    return error.get("type") == "json_invalid" or tuple(error.get("loc", ())) == ("body",)


def _body_violation(error: dict[str, Any]) -> FieldViolation:
    return FieldViolation(
        field=".".join(str(part) for part in error.get("loc", ())[1:]) or "body",
        rejected_value=None if error.get("type") == "missing" else error.get("input"),
        message=error.get("msg", "Invalid value"),
        code=error.get("type", "value_error"),
    )


def _location(error: dict[str, Any]) -> str:
    loc = error.get("loc") or ("",)
    return str(loc[0])


def _parser_message(error: dict[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        reason = (error.get("ctx") or {}).get("error", "")
        return f"{error.get('msg', 'JSON decode error')}: {reason}"
    if error.get("type") == "missing":
        return "Required request body is missing"
    return str(error.get("msg", ""))


def _summarize(violations: list[FieldViolation]) -> str:
    return ", ".join(f"{v.field}:{v.message}" for v in violations)


def _declared_type(request: Request, location: str, name: str) -> str:
    """Look up the annotation of a route parameter, ``unknown`` if not found.

    Parameters declared by sub-dependencies are searched as well.
    """
    route = request.scope.get("route")
    pending = [getattr(route, "dependant", None)]
    while pending:
        dependant = pending.pop()
        if dependant is None:
            continue
        for param in getattr(dependant, f"{location}_params", []):
            if name in (param.name, param.alias):
                annotation = param.field_info.annotation
                return getattr(annotation, "__name__", str(annotation))
        pending.extend(dependant.dependencies)
    return "unknown"


def _allowed_methods(request: Request, exc: StarletteHTTPException) -> list[str]:
    """Collect the methods of every route whose path matches the request."""
    methods: set[str] = set()
    for route in request.app.router.routes:
        route_methods = getattr(route, "methods", None)
        if not route_methods:
            continue
        match, _ = route.matches(request.scope)
        if match is not Match.NONE:
            methods.update(route_methods)
    if not methods and exc.headers:
        methods.update(m.strip() for m in exc.headers.get("Allow", "").split(",") if m.strip())
    return sorted(methods)


# ------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------


def _settings_for(request: Request) -> Settings:
    return getattr(request.app.state, "settings", default_settings)


def problem_response(request: Request, problem: Problem) -> JSONResponse:
    """Render ``problem`` as an RFC 7807 response."""
    problem_type = problem.problem_type
    body = ProblemDetails(
        type=_settings_for(request).problem_type(problem.slug),
        title=problem_type.title,
        status=problem_type.status,
        detail=problem.detail,
        instance=request.url.path,
        trace_id=get_trace_id(),
        errors=problem.errors,
    )
    # Only absent top-level members are dropped; a field violation keeps
    # its null rejected_value.
    content = {
        key: value
        for key, value in jsonable_encoder(body.model_dump()).items()
        if value is not None
    }
    return JSONResponse(
        status_code=problem_type.status,
        content=content,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
        headers=problem.headers or None,
    )


def _log_problem(request: Request, problem: Problem, exc: Exception) -> None:
    if problem.log_level >= logging.ERROR:
        logger.log(
            problem.log_level,
            "ERROR_HANDLED | type=%s | endpoint=%s | userId=%s | message=%s",
            problem.problem_type.name,
            request.url.path,
            get_user_id(),
            problem.log_message,
            exc_info=exc if problem.with_traceback else None,
        )
    else:
        logger.log(
            problem.log_level,
            "%s_HANDLED | type=%s | endpoint=%s | message=%s",
            logging.getLevelName(problem.log_level),
            problem.problem_type.name,
            request.url.path,
            problem.log_message,
        )


def render_exception(request: Request, exc: Exception) -> JSONResponse:
    """Translate, log and render any exception reaching the boundary."""
    problem = build_problem(request, exc)
    _log_problem(request, problem, exc)
    return problem_response(request, problem)


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    return render_exception(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register the problem details handler on the FastAPI application.

    Exceptions outside these families escape the route layer and are
    rendered by RequestContextMiddleware through the same handler.

    Args:
        app: The FastAPI application instance.
    """
    # SlowAPIMiddleware calls this handler synchronously.
    app.add_exception_handler(RateLimitExceeded, render_exception)

    for exc_class in (
        RequestValidationError,
        StarletteHTTPException,
        CatalogDomainError,
        UnsupportedMediaTypeError,
        AuthenticationError,
        AccessDeniedError,
        IntegrityError,
        ValueError,
    ):
        app.add_exception_handler(exc_class, handle_exception)
