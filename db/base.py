from fastapi import Request
from db.playground import Session
from db.sandbox import RunController


def get_session(request: Request) -> Session:
    return request.app.state.session


def get_runner(request: Request) -> RunController:
    return request.app.state.runner
