"""Decision API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import ApplicantData, BatchDecisionRequest, BatchDecisionResponse
from src.application.services import DecisionService
from src.core.dependencies import get_decision_service
from src.presentation.schemas import (
    BatchDecisionRequestSchema,
    BatchDecisionResponseSchema,
    ErrorResponseSchema,
    VerdictSchema,
)

decision_router = APIRouter(
    prefix="/decisions",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


def _to_schema(response: BatchDecisionResponse) -> BatchDecisionResponseSchema:
    return BatchDecisionResponseSchema(
        processed_count=response.processed_count,
        approved_count=response.approved_count,
        verdicts=[
            VerdictSchema(
                name=v.name,
                credit_score=v.credit_score,
                dti=v.dti,
                risk_score=v.risk_score,
                tree_result=v.tree_result,
                bayes_result=v.bayes_result,
                final_decision=v.final_decision,
            )
            for v in response.verdicts
        ],
    )


@decision_router.post(
    "",
    response_model=BatchDecisionResponseSchema,
    status_code=200,
    summary="Evaluate Applicant Batch",
    description="""Score, order and classify a batch of loan applicants""",
    responses={
        200: {"description": "Batch evaluated successfully"},
    },
)
async def evaluate_batch(
    request: BatchDecisionRequestSchema,
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
) -> BatchDecisionResponseSchema:
    """
    Evaluate a batch of applicants.

    Returns one verdict per applicant, lowest risk score first.
    """
    dto = BatchDecisionRequest(
        applicants=[
            ApplicantData(
                name=a.name,
                credit_score=a.credit_score,
                income=a.income,
                loan_amount=a.loan_amount,
                existing_debt=a.existing_debt,
                defaults=a.defaults,
            )
            for a in request.applicants
        ]
    )

    return _to_schema(decision_service.evaluate_batch(dto))


@decision_router.get(
    "/reference",
    response_model=BatchDecisionResponseSchema,
    summary="Evaluate Reference Dataset",
    description="Evaluate the built-in five-applicant reference dataset.",
)
async def evaluate_reference(
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
) -> BatchDecisionResponseSchema:
    return _to_schema(decision_service.evaluate_reference())
