from fastapi import APIRouter

from leasechain.api.routes import chains, deploy, generate, utils

api_router = APIRouter()
api_router.include_router(utils.router, tags=["utils"])
api_router.include_router(generate.router, prefix="/generate", tags=["generate"])
api_router.include_router(deploy.router, prefix="/deploy", tags=["deploy"])
api_router.include_router(chains.router, prefix="/chains", tags=["chains"])
