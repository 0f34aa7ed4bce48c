"""
Loan Triage - Credit Risk Scoring Service

A FastAPI-based microservice that orders loan applicants by risk score
and classifies them with a threshold decision tree and a Naive Bayes
approval model.
"""

__version__ = "0.1.0"
