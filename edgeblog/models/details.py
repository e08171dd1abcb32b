# edgeblog/models/details.py
"""
Bloques de detalle por categoría.

Un post de "scholarships" lleva ScholarshipDetails, uno de "jobs" lleva
JobDetails y el resto no lleva ninguno. parse_category_details() valida
el formulario completo: los campos que no pertenecen a la categoría se
rechazan en lugar de ignorarse.
"""
import json
import re
from dataclasses import dataclass, field
from typing import List, Optional

from edgeblog.errors import ValidationError

CATEGORIES = ("news", "nysc", "scholarships", "jobs")
JOB_TYPES = ("full-time", "part-time", "contract", "internship", "temporary", "remote")

BASE_FIELDS = {"title", "body", "category", "author", "tags"}
SCHOLARSHIP_FIELDS = {"country", "degree", "description", "funding", "deadline", "requirements"}
JOB_FIELDS = {
    "company",
    "location",
    "jobType",
    "salaryRange",
    "experienceRequired",
    "applicationDeadline",
    "responsibilities",
    "requirements",
    "link",
}


def parse_string_list(value, name):
    """Acepta una lista o un string JSON con una lista de strings."""
    if value is None or value == "":
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            raise ValidationError(f"Field '{name}' must be a JSON array of strings.")
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationError(f"Field '{name}' must be a JSON array of strings.")
    return [item.strip() for item in value if item.strip()]


def _optional_text(fields, name):
    value = fields.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{name}' must be a string.")
    return value.strip() or None


_SALARY_PART = re.compile(r"^(\d+(?:\.\d+)?)(k?)$")


def parse_salary_range(salary_range):
    """
    "$50k - $70k" -> {"min": 50000, "max": 70000}
    "90k"         -> {"min": 90000, "max": 90000}
    """
    if not salary_range:
        return {}

    parts = salary_range.replace("$", "").replace(",", "").lower().split("-")
    if len(parts) > 2:
        raise ValidationError("Field 'salaryRange' must look like '50k-70k' or '90k'.")

    amounts = []
    for part in parts:
        match = _SALARY_PART.match(part.strip())
        if not match:
            raise ValidationError("Field 'salaryRange' must look like '50k-70k' or '90k'.")
        amount = float(match.group(1))
        if match.group(2):
            amount *= 1000
        amounts.append(int(amount) if amount.is_integer() else amount)

    low, high = amounts[0], amounts[-1]
    if low > high:
        raise ValidationError("Field 'salaryRange' minimum is greater than maximum.")
    return {"min": low, "max": high}


@dataclass
class ScholarshipDetails:
    country: Optional[str] = None
    degree: Optional[str] = None
    description: Optional[str] = None
    funding: Optional[str] = None
    deadline: Optional[str] = None
    requirements: List[str] = field(default_factory=list)

    @classmethod
    def from_fields(cls, fields):
        return cls(
            country=_optional_text(fields, "country"),
            degree=_optional_text(fields, "degree"),
            description=_optional_text(fields, "description"),
            funding=_optional_text(fields, "funding"),
            deadline=_optional_text(fields, "deadline"),
            requirements=parse_string_list(fields.get("requirements"), "requirements"),
        )

    def to_dict(self):
        return {
            "country": self.country,
            "degree": self.degree,
            "description": self.description,
            "funding": self.funding,
            "deadline": self.deadline,
            "requirements": list(self.requirements),
        }


@dataclass
class JobDetails:
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    salary: dict = field(default_factory=dict)
    salary_range: Optional[str] = None
    experience_required: Optional[str] = None
    application_deadline: Optional[str] = None
    responsibilities: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    link: Optional[str] = None

    @classmethod
    def from_fields(cls, fields):
        job_type = _optional_text(fields, "jobType")
        if job_type is not None:
            job_type = job_type.lower()
            if job_type not in JOB_TYPES:
                raise ValidationError(
                    f"Invalid jobType '{job_type}'. Allowed: {', '.join(JOB_TYPES)}."
                )

        salary_range = _optional_text(fields, "salaryRange")
        return cls(
            company=_optional_text(fields, "company"),
            location=_optional_text(fields, "location"),
            job_type=job_type,
            salary=parse_salary_range(salary_range),
            salary_range=salary_range,
            experience_required=_optional_text(fields, "experienceRequired"),
            application_deadline=_optional_text(fields, "applicationDeadline"),
            responsibilities=parse_string_list(fields.get("responsibilities"), "responsibilities"),
            requirements=parse_string_list(fields.get("requirements"), "requirements"),
            link=_optional_text(fields, "link"),
        )

    def to_dict(self):
        return {
            "company": self.company,
            "location": self.location,
            "jobType": self.job_type,
            "salary": dict(self.salary),
            "salaryRange": self.salary_range,
            "experienceRequired": self.experience_required,
            "applicationDeadline": self.application_deadline,
            "responsibilities": list(self.responsibilities),
            "requirements": list(self.requirements),
            "link": self.link,
        }


_VARIANTS = {
    "scholarships": (SCHOLARSHIP_FIELDS, ScholarshipDetails),
    "jobs": (JOB_FIELDS, JobDetails),
}


def parse_category_details(category, fields):
    """
    Devuelve ScholarshipDetails, JobDetails o None según la categoría.

    Lanza ValidationError si el formulario trae campos que no son válidos
    para la categoría elegida.
    """
    if category not in CATEGORIES:
        raise ValidationError(f"Invalid category '{category}'. Allowed: {', '.join(CATEGORIES)}.")

    allowed, variant = _VARIANTS.get(category, (set(), None))
    unexpected = sorted(set(fields) - BASE_FIELDS - allowed)
    if unexpected:
        raise ValidationError(
            f"Unexpected fields for category '{category}': {', '.join(unexpected)}."
        )

    if variant is None:
        return None
    return variant.from_fields(fields)
