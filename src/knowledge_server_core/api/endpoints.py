from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from ..exceptions import AnswerError, KnowledgeStoreError
from ..models.processing import FailureKind
from ..server import KnowledgeServer
from .schemas import AddKnowledgeRequest, AnswerResponse, AskRequest, ErrorResponse, SuccessResponse

router = APIRouter()

# failure kind -> HTTP status
STATUS_BY_KIND = {
    "InvalidRequest": 400,
    "UploadRejected": 400,
    FailureKind.UNSUPPORTED_FORMAT.value: 400,
    FailureKind.MALFORMED_DOCUMENT.value: 400,
    FailureKind.EMPTY_DOCUMENT.value: 422,
    FailureKind.NO_RECOVERABLE_TEXT.value: 422,
    FailureKind.RECOGNITION_FAILURE.value: 502,
    "StoreFailure": 500,
}


def error_responses(*codes: int) -> dict:
    """OpenAPI description of the error bodies a route can return"""
    return {code: {"model": ErrorResponse} for code in codes}


def get_server(request: Request) -> KnowledgeServer:
    return request.app.state.server


def error_response(result: dict) -> JSONResponse:
    kind = result.get("kind")
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(kind, 500),
        content={"error": result.get("error") or "Request failed", "kind": kind},
    )


@router.get("/", response_class=PlainTextResponse)
async def index():
    """Banner confirming the backend is up"""
    return "AI Chatbot Backend Running"


@router.get("/health")
async def health(request: Request):
    """Health check endpoint"""
    return get_server(request).health_check()


@router.post(
    "/add",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses=error_responses(400, 500),
)
async def add_knowledge(body: AddKnowledgeRequest, request: Request):
    """Add manually typed knowledge"""
    result = await get_server(request).add_knowledge(body.content, body.source)
    if not result["success"]:
        return error_response(result)
    return SuccessResponse()


@router.post(
    "/upload",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    responses=error_responses(400, 422, 500, 502),
)
async def upload_file(request: Request, file: UploadFile = File(...)):
    """Upload a PDF or DOCX file and index its text"""
    logger.info(f"--> Upload request: {file.filename}")
    file_content = await file.read()
    await file.close()

    result = await get_server(request).upload_file(file_content, file.filename)
    if not result["success"]:
        return error_response(result)
    return SuccessResponse(message="File uploaded and indexed", method=result["method"])


@router.post("/ask", response_model=AnswerResponse, responses=error_responses(400, 500, 502))
async def ask(body: AskRequest, request: Request):
    """Answer a question from the stored knowledge"""
    try:
        answer = await get_server(request).ask(body.question)
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except KnowledgeStoreError as e:
        logger.error(f"Knowledge store error: {e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})
    except AnswerError as e:
        return JSONResponse(status_code=502, content={"error": e.message})
    return AnswerResponse(answer=answer)
