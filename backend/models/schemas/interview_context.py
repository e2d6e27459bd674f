"""Talking points an interview-response generator can draw on."""

from typing import Annotated

from pydantic import BeforeValidator

from models.schemas.base import CamelModel, Text, UniqueTextList, empty_object


class TechnicalResponses(CamelModel):
    core_technologies: UniqueTextList = []
    project_examples: UniqueTextList = []
    problem_solving: UniqueTextList = []


class BehavioralExamples(CamelModel):
    leadership: UniqueTextList = []
    teamwork: UniqueTextList = []
    initiative: UniqueTextList = []
    adaptability: UniqueTextList = []


class CompanyAlignment(CamelModel):
    value_proposition: Text = ""
    industry_relevance: Text = ""
    growth_potential: Text = ""


class AuthenticChallenges(CamelModel):
    areas_for_growth: UniqueTextList = []
    learning_goals: UniqueTextList = []
    approach_to_weaknesses: Text = ""


class InterviewContext(CamelModel):
    technical_responses: Annotated[TechnicalResponses, BeforeValidator(empty_object)] = TechnicalResponses()
    behavioral_examples: Annotated[BehavioralExamples, BeforeValidator(empty_object)] = BehavioralExamples()
    company_alignment: Annotated[CompanyAlignment, BeforeValidator(empty_object)] = CompanyAlignment()
    authentic_challenges: Annotated[AuthenticChallenges, BeforeValidator(empty_object)] = AuthenticChallenges()
    questions_to_ask: UniqueTextList = []
