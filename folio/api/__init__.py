"""API routes."""

from fastapi import APIRouter

from folio.api import auth, content, health, projects, public, skills

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(public.router, prefix="/public", tags=["public"])
router.include_router(content.router, prefix="/admin/content", tags=["admin"])
router.include_router(skills.router, prefix="/admin/skills", tags=["admin"])
router.include_router(projects.router, prefix="/admin/projects", tags=["admin"])
