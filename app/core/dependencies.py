from app.services.session_service import SalesSession

# The dashboard serves a single interactive session; state lives only as long as the process.
_session = SalesSession()


def get_session() -> SalesSession:
    """FastAPI dependency returning the session that owns the sales series.

    Tests override this dependency to get a fresh session per test.

    Returns:
        SalesSession: The process-wide dashboard session.
    """
    return _session
