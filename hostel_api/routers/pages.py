from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def home() -> str:
    return "Hello World"


@router.get("/about", response_class=PlainTextResponse)
async def about() -> str:
    return "This is the About page"
