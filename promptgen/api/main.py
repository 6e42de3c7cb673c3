"""FastAPI prompt service.

Exposes the prompt catalog to a generation pipeline:
- list the available code generator prompts
- fetch a raw template
- render a template with a captured DOM and page URL

The service does not call any LLM; it only returns prompt text.
"""

from __future__ import annotations

from fastapi import FastAPI

from promptgen.api.routes import register_routes

tags_metadata = [
    {
        "name": "Prompts",
        "description": "Code generator prompt templates and rendering"
    }
]

app = FastAPI(
    title='Prompt Catalog Service',
    version='1.0.0',
    description='Prompt templates for UI test code generation',
    openapi_tags=tags_metadata
)

# Register all API routes
register_routes(app)
