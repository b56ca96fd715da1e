from fastapi import FastAPI, HTTPException, Request, Form
from pydantic import BaseModel
from datetime import datetime
import logging
import sys

from . import config
from .formatter import format_relative_date
from .matcher import parse_smart_date, strip_date_match
from .models import DateFormat, MatchSpan, TimeFormat

logger = logging.getLogger(__name__)
# Ensure INFO-level messages from this module appear on the server console when
# no handlers are configured (safe fallback for development/testing).
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter('%(asctime)s %(levelname)s:%(name)s: %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(logging.DEBUG if config.DEV_MODE else logging.INFO)

app = FastAPI(title='smartdate')
logger.info('config: DATE_FORMAT=%s TIME_FORMAT=%s MAX_INPUT_LENGTH=%d',
            config.DATE_FORMAT, config.TIME_FORMAT, config.MAX_INPUT_LENGTH)


class SpanModel(BaseModel):
    start: int
    end: int


class ParseResponse(BaseModel):
    date: str | None
    match: SpanModel | None
    has_time: bool
    matched_text: str
    cleaned_text: str


class StripResponse(BaseModel):
    text: str


class FormatResponse(BaseModel):
    label: str


def _parse_iso(value: str | None, field: str) -> datetime | None:
    if value is None or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        raise HTTPException(status_code=400, detail=f'invalid {field}: expected ISO 8601')


def _check_text(text: str | None) -> str:
    text = text or ''
    if len(text) > config.MAX_INPUT_LENGTH:
        raise HTTPException(status_code=400, detail='text too long')
    return text


def _check_choice(value: str | None, allowed, field: str) -> str | None:
    if value is None or not value.strip():
        return None
    if value.strip().lower() not in allowed:
        raise HTTPException(status_code=400, detail=f'invalid {field}')
    return value.strip().lower()


@app.get('/health')
async def health():
    return {'ok': True}


@app.post('/parse', response_model=ParseResponse)
async def api_parse_smart_date(request: Request, text: str = Form(None), now: str = Form(None),
                               date_format: str = Form(None)):
    """Find the due date in task text and return its span and the cleaned text.

    Accepts `text` as form data or query param.
    """
    # fallback to query param if form not provided
    if not text:
        text = request.query_params.get('text')
    text = _check_text(text)
    ref = _parse_iso(now, 'now')
    fmt = _check_choice(date_format, [f.value for f in DateFormat], 'date_format')
    result = parse_smart_date(text, ref, fmt)
    if result is None:
        return ParseResponse(date=None, match=None, has_time=False, matched_text='', cleaned_text=text.strip())
    logger.debug('parse: %r -> %s', text, result.date)
    return ParseResponse(
        date=result.date,
        match=SpanModel(**result.match.to_dict()),
        has_time=result.has_time,
        matched_text=result.match.slice(text),
        cleaned_text=strip_date_match(text, result.match),
    )


@app.post('/strip', response_model=StripResponse)
async def api_strip_date_match(text: str = Form(...), start: int = Form(...), end: int = Form(...)):
    text = _check_text(text)
    if not (0 <= start <= end <= len(text)):
        raise HTTPException(status_code=400, detail='span out of range')
    return StripResponse(text=strip_date_match(text, MatchSpan(start, end)))


@app.get('/format', response_model=FormatResponse)
async def api_format_relative_date(date: str, has_time: bool = False, time_format: str | None = None,
                                   now: str | None = None):
    """Return the short relative label for an ISO due date ('tmrw 10:00 pm')."""
    due = _parse_iso(date, 'date')
    ref = _parse_iso(now, 'now')
    fmt = _check_choice(time_format, [f.value for f in TimeFormat], 'time_format')
    try:
        label = format_relative_date(due, has_time, fmt, ref)
    except Exception:
        logger.exception('api_format_relative_date failed')
        raise HTTPException(status_code=500, detail='format failed')
    return FormatResponse(label=label)
