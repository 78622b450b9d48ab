from fastapi import APIRouter, HTTPException, Depends

from ...models.schemas import CredentialStatus, CredentialUpdate
from ...api.deps import get_session
from ...core.errors import InvalidCredentialError
from ...services.session import AnalysisSession

router = APIRouter(prefix="/api")


def _status(session: AnalysisSession) -> CredentialStatus:
    store = session.credentials
    return CredentialStatus(
        configured=store.credential is not None,
        display_value=store.display_value,
        provider=session.provider.kind.value,
    )


@router.get("/credential", response_model=CredentialStatus)
async def credential_get(session: AnalysisSession = Depends(get_session)):
    return _status(session)


@router.post("/credential", response_model=CredentialStatus)
async def credential_save(update: CredentialUpdate, session: AnalysisSession = Depends(get_session)):
    try:
        session.save_credential(update.api_key)
    except InvalidCredentialError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return _status(session)
