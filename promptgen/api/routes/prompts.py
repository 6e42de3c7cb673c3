from fastapi import APIRouter, Depends, HTTPException

from promptgen.api.core.container import get_container
from promptgen.core.errors import MissingPromptVariableError, PromptNotFoundError
from promptgen.observability.tracing import traced
from promptgen.schemas import (
    PromptDetail,
    PromptSummary,
    RenderPromptIn,
    RenderPromptOut,
    label_for,
)

router = APIRouter(prefix="/prompts", tags=["Prompts"])


def _get_template(container, key: str):
    try:
        return container.registry.get(key)
    except PromptNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.get("", response_model=list[PromptSummary], summary="List all prompts")
async def list_prompts(container=Depends(get_container)):
    return [
        PromptSummary(key=t.key, label=label_for(t.key), placeholders=t.placeholders)
        for t in container.registry
    ]


@router.get("/{key}", response_model=PromptDetail, summary="Get a raw prompt template")
async def get_prompt(key: str, container=Depends(get_container)):
    template = _get_template(container, key)
    return PromptDetail(
        key=template.key,
        label=label_for(template.key),
        placeholders=template.placeholders,
        body=template.body,
    )


@router.post("/{key}/render", response_model=RenderPromptOut, summary="Render a prompt")
async def render_prompt(
    key: str,
    payload: RenderPromptIn,
    container=Depends(get_container),
):
    with traced("prompt.render", key=key, variables=sorted(payload.variables)) as span:
        template = _get_template(container, key)
        renderer = container.renderer
        try:
            prompt = renderer.render(template.body, payload.variables)
        except MissingPromptVariableError as exc:
            raise HTTPException(status_code=422, detail=str(exc))
        unresolved = renderer.unresolved(template.body, payload.variables)
        span.attributes["unresolved"] = unresolved
    return RenderPromptOut(key=template.key, prompt=prompt, unresolved=unresolved)
