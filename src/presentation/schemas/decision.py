"""Decision-related Pydantic schemas."""

from pydantic import BaseModel, Field, field_validator, ConfigDict


class ApplicantSchema(BaseModel):
    """Raw fields for one loan applicant."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Applicant name",
        examples=["Amar"],
    )
    credit_score: int = Field(
        ...,
        gt=0,
        description="Bureau credit score",
        examples=[750],
    )
    income: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Income; zero marks the applicant as unaffordable",
        examples=[5000.0],
    )
    loan_amount: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Requested loan amount",
        examples=[10000.0],
    )
    existing_debt: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Outstanding debt",
        examples=[1000.0],
    )
    defaults: int = Field(
        ...,
        ge=0,
        description="Number of prior defaults",
        examples=[0],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not just whitespace."""
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v.strip()


class BatchDecisionRequestSchema(BaseModel):
    """Schema for POST /v1/decisions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "applicants": [
                        {
                            "name": "Amar",
                            "credit_score": 750,
                            "income": 5000,
                            "loan_amount": 10000,
                            "existing_debt": 1000,
                            "defaults": 0,
                        },
                        {
                            "name": "Snehal",
                            "credit_score": 550,
                            "income": 2000,
                            "loan_amount": 7000,
                            "existing_debt": 4000,
                            "defaults": 1,
                        },
                    ]
                }
            ]
        }
    )
    applicants: list[ApplicantSchema] = Field(
        ...,
        max_length=1000,
        description="Applicants evaluated together; the Naive Bayes model is trained on this batch",
    )


class VerdictSchema(BaseModel):
    """Schema for one applicant verdict."""

    name: str = Field(..., description="Applicant name")
    credit_score: int = Field(..., description="Applicant credit score")
    dti: float = Field(
        ...,
        description="Debt-to-income ratio (1e9 when income is zero)",
        examples=[0.2],
    )
    risk_score: float = Field(
        ...,
        description="Composite risk score (lower is better)",
        examples=[0.2013],
    )
    tree_result: str = Field(
        ...,
        description="Decision tree prediction",
        examples=["Approved"],
    )
    bayes_result: str = Field(
        ...,
        description="Naive Bayes prediction",
        examples=["Approved"],
    )
    final_decision: str = Field(
        ...,
        description="Combined verdict",
        examples=["APPROVED"],
    )


class BatchDecisionResponseSchema(BaseModel):
    """Schema for batch decision responses."""

    processed_count: int = Field(
        ...,
        ge=0,
        description="Number of applicants evaluated",
    )
    approved_count: int = Field(
        ...,
        ge=0,
        description="Number of APPROVED verdicts",
    )
    verdicts: list[VerdictSchema] = Field(
        ...,
        description="Verdicts in ascending risk order",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "processed_count": 1,
                    "approved_count": 1,
                    "verdicts": [
                        {
                            "name": "Amar",
                            "credit_score": 750,
                            "dti": 0.2,
                            "risk_score": 0.2013,
                            "tree_result": "Approved",
                            "bayes_result": "Approved",
                            "final_decision": "APPROVED",
                        }
                    ],
                }
            ]
        }
    )
