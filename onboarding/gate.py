from __future__ import annotations

from .schema import PageKind, SessionContext, SessionState


def state_of(session: SessionContext) -> SessionState:
    if session.user is None:
        return SessionState.unauthenticated
    if session.clinic is None:
        return SessionState.authenticated_no_clinic
    return SessionState.authenticated_with_clinic


def route(session: SessionContext, requested: PageKind) -> PageKind:
    """Decide which page the caller should land on.

    Rules are checked in order and the first match wins:
      1. no user            -> authentication
      2. no clinic          -> clinic form
      3. otherwise          -> the requested page

    The clinic form inverts rule 3: a user who already has a clinic is sent
    to the dashboard instead of onboarding again. The authentication page is
    always served as requested.
    """
    if requested is PageKind.authentication:
        return requested

    state = state_of(session)
    if state is SessionState.unauthenticated:
        return PageKind.authentication

    if requested is PageKind.clinic_form:
        if state is SessionState.authenticated_with_clinic:
            return PageKind.dashboard
        return PageKind.clinic_form

    if state is SessionState.authenticated_no_clinic:
        return PageKind.clinic_form
    return requested
