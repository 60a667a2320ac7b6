"""
Portfolio client

Python client for the portfolio API: HTTP resources, the signed-in session
state, and edit buffers that stage changes locally until saved.
"""
from .api import APIError, PortfolioClient
from .auth import AuthResult, AuthSession
from .buffers import (
    BufferClosed,
    DeleteConfirmation,
    EditBuffer,
    ExperienceBuffer,
    ProjectBuffer,
    SkillCategoryBuffer,
    SkillDraft,
)

__all__ = [
    'APIError',
    'AuthResult',
    'AuthSession',
    'BufferClosed',
    'DeleteConfirmation',
    'EditBuffer',
    'ExperienceBuffer',
    'PortfolioClient',
    'ProjectBuffer',
    'SkillCategoryBuffer',
    'SkillDraft',
]
