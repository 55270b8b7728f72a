import starlette.requests
from starlette.responses import JSONResponse

from course_rating_api.exceptions import DataSourceError, InvalidInput, NumericDomainError, ObjectNotFound
from course_rating_api.schemas.base import StatusResponseModel

from .base import app


@app.exception_handler(ObjectNotFound)
async def not_found_handler(req: starlette.requests.Request, exc: ObjectNotFound):
    return JSONResponse(
        content=StatusResponseModel(status="Error", message=exc.eng, ru=exc.ru).model_dump(), status_code=404
    )


@app.exception_handler(InvalidInput)
async def invalid_input_handler(req: starlette.requests.Request, exc: InvalidInput):
    return JSONResponse(
        content=StatusResponseModel(status="Error", message=exc.eng, ru=exc.ru).model_dump(), status_code=500
    )


@app.exception_handler(NumericDomainError)
async def numeric_domain_handler(req: starlette.requests.Request, exc: NumericDomainError):
    return JSONResponse(
        content=StatusResponseModel(status="Error", message=exc.eng, ru=exc.ru).model_dump(), status_code=500
    )


@app.exception_handler(DataSourceError)
async def data_source_handler(req: starlette.requests.Request, exc: DataSourceError):
    return JSONResponse(
        content=StatusResponseModel(status="Error", message=exc.eng, ru=exc.ru).model_dump(), status_code=503
    )
