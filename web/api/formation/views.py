"""Formation API views - thin command layer over a caller-owned session.

Every command returns a fresh snapshot, or a ValidationFailure when the
session refused it. Unknown party or portfolio names raise NotFoundError.
"""

from app.container import container
from app.models.formation import REFUSAL_MESSAGES, Refusal
from app.services.formation import FormationSession

from .schemas import SessionSnapshot, ValidationFailure


def _respond(session: FormationSession, refusal: Refusal | None) -> SessionSnapshot | ValidationFailure:
    if refusal is not None:
        return ValidationFailure(reason=refusal, message=REFUSAL_MESSAGES[refusal])
    return get_snapshot(session)


def new_session() -> FormationSession:
    """Start a formation session over the shared chamber."""
    return container.new_session()


def get_snapshot(session: FormationSession) -> SessionSnapshot:
    return SessionSnapshot(**session.snapshot().to_dict())


def reset_session(session: FormationSession) -> SessionSnapshot:
    """Clear the attempt and unlock the session."""
    session.reset()
    return get_snapshot(session)


def toggle_member(session: FormationSession, party_id: str) -> SessionSnapshot | ValidationFailure:
    return _respond(session, session.toggle_member(party_id))


def set_allocation(
    session: FormationSession,
    portfolio: str,
    party_id: str | None,
) -> SessionSnapshot | ValidationFailure:
    return _respond(session, session.set_allocation(portfolio, party_id))


def evaluate(session: FormationSession) -> SessionSnapshot | ValidationFailure:
    """Hold the investiture vote."""
    return _respond(session, session.evaluate())
