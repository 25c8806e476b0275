"""HTTP facade: binds query parameters to switch sessions and returns JSON.

Routes:
  GET /                                                   usage page
  GET /ports?switch=<addr>[&community=<c>]                list ports and OIDs
  GET /port?switch=<addr>[&community=<c>]&oid=<oid>&ops=on|off
  GET /port?switch=<addr>[&community=<c>]&name=<port>&ops=on|off
  GET /sysname?switch=<addr>[&community=<c>]

Every request opens its own session and closes it before responding.
"""

from __future__ import annotations

import argparse
import os

import uvicorn
from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from loguru import logger
from pydantic import BaseModel

from portops import __version__, configure_logging
from portops.config import PortOpsConfig
from portops.exceptions import InvalidArgumentError, SwitchError
from portops.session import open_session

WELCOME = """
<html>
<title>Switch Port Ops</title>
<body>
<h3>List all switch ports and their OID</h3>
GET /ports?switch=&#60;switch address&#62;[&community=&#60;community string, private is the default&#62;]
<h3>On/Off a switch port based on its port OID or name</h3>
GET /port?switch=&#60;switch address&#62;[&community=&#60;community string, private is the default&#62;]&oid=&#60;port OID&#62;&ops=&#60;on|off&#62;
<br>
GET /port?switch=&#60;switch address&#62;[&community=&#60;community string&#62;]&name=&#60;port name&#62;&ops=&#60;on|off&#62;
<h3>Show the switch's system name</h3>
GET /sysname?switch=&#60;switch address&#62;[&community=&#60;community string&#62;]
</body>
</html>
"""


class HTTPMsg(BaseModel):
    """Status/message body returned for control calls and errors."""

    code: int
    message: str


class SysnameResponse(BaseModel):
    switch: str
    sysname: str


app = FastAPI(title="portops", version=__version__)


def get_config() -> PortOpsConfig:
    return PortOpsConfig.from_env()


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content=HTTPMsg(code=400, message=message).model_dump())


@app.exception_handler(SwitchError)
async def switch_error_handler(request: Request, exc: SwitchError) -> JSONResponse:
    logger.warning(f"{request.url.path} failed: {exc}")
    return _bad_request(str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(".".join(str(p) for p in err["loc"][1:]) or "request" for err in exc.errors())
    return _bad_request(f"Missing or invalid parameter(s): {fields}")


@app.get("/", response_class=HTMLResponse)
def home() -> str:
    return WELCOME


@app.get("/ports", response_model=None)
def list_ports(
    switch: str = Query(..., description="Switch address"),
    community: str | None = Query(None, description="SNMP community"),
    config: PortOpsConfig = Depends(get_config),
) -> JSONResponse:
    with open_session(switch, community or config.write_community, config) as session:
        ports = session.enumerate_ports()
    return JSONResponse(content=[p.model_dump(by_alias=True) for p in ports])


@app.get("/port", response_model=HTTPMsg)
def set_port(
    switch: str = Query(..., description="Switch address"),
    ops: str = Query(..., description="on or off"),
    oid: str | None = Query(None, description="ifAdminStatus OID of the port"),
    name: str | None = Query(None, description="Port name as listed by /ports"),
    community: str | None = Query(None, description="SNMP community"),
    config: PortOpsConfig = Depends(get_config),
) -> HTTPMsg:
    if ops not in ("on", "off"):
        raise InvalidArgumentError(f"OID {oid} or ops {ops} is not provided or valid")
    if (oid is None) == (name is None):
        raise InvalidArgumentError("Exactly one of 'oid' or 'name' must be provided")

    with open_session(switch, community or config.write_community, config) as session:
        if oid is not None:
            ack = session.set_admin_status(oid, ops)
        else:
            session.enumerate_ports()
            ack = session.set_port_state(name, ops)  # type: ignore[arg-type]
    return HTTPMsg(code=200, message=ack.message)


@app.get("/sysname", response_model=SysnameResponse)
def get_sysname(
    switch: str = Query(..., description="Switch address"),
    community: str | None = Query(None, description="SNMP community"),
    config: PortOpsConfig = Depends(get_config),
) -> SysnameResponse:
    with open_session(switch, community or config.write_community, config) as session:
        return SysnameResponse(switch=session.address, sysname=session.get_sysname())


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the HTTP server."""
    parser = argparse.ArgumentParser(
        prog="portops-serve",
        description="Serve switch port operations over HTTP.",
    )
    parser.add_argument("--bind", default="0.0.0.0", help="Listen address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Listen port (default: 8080)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for the HTTP server."""
    parsed = parse_args(args)
    configure_logging(level="DEBUG" if parsed.verbose else os.getenv("LOGURU_LEVEL", "INFO"))
    logger.info(f"Start HTTP server on {parsed.bind}:{parsed.port}")
    uvicorn.run(app, host=parsed.bind, port=parsed.port, log_level="debug" if parsed.verbose else "info")


if __name__ == "__main__":
    main()
