"""
Tutor API Endpoints

- GET /api/v1/subjects
- POST /api/v1/tutors
- GET /api/v1/tutors
- GET /api/v1/tutors/{name}
- PUT /api/v1/tutors/{name}/availability
"""
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Path, status
from pydantic import BaseModel, Field

from tuition.models.subject import Subject
from tuition.models.tutor import Tutor
from tuition.services.tuition_system import get_tuition_system

router = APIRouter(prefix="/api/v1", tags=["tutors"])


class TutorCreateRequest(BaseModel):
    """Request model for registering a tutor"""
    name: str = Field(..., min_length=1, description="Tutor name, unique in the registry")
    specialties: List[str] = Field(default_factory=list, description="Subject names, e.g. MATH")


class AvailabilityRequest(BaseModel):
    """Availability flag for one hour of the day"""
    hour: int = Field(..., description="Hour in 24-hour format")
    available: bool


class TutorResponse(BaseModel):
    """Standard response wrapper"""
    data: Dict[str, Any]


class TutorListResponse(BaseModel):
    data: List[Dict[str, Any]]


def tutor_to_dict(tutor: Tutor) -> Dict[str, Any]:
    return {
        "name": tutor.name,
        "specialties": sorted(subject.name for subject in tutor.specialties),
        "timetable": {str(hour): available for hour, available in sorted(tutor.timetable.items())},
    }


def lookup_tutor(name: str) -> Tutor:
    tutor = get_tuition_system().get_tutor(name)
    if tutor is None:
        raise HTTPException(status_code=404, detail=f"Tutor '{name}' not found")
    return tutor


@router.get("/subjects", response_model=TutorListResponse, tags=["subjects"])
async def list_subjects():
    """List the subject catalog"""
    return TutorListResponse(data=[
        {"name": subject.name, "label": subject.label} for subject in Subject
    ])


@router.post("/tutors", response_model=TutorResponse, status_code=status.HTTP_201_CREATED)
async def create_tutor(request: TutorCreateRequest):
    """
    Register a tutor.

    Specialty names are parsed case-insensitively; an unknown name rejects
    the whole request. A tutor with an existing name replaces the old one
    unless TUTOR_DUPLICATE_POLICY=reject, which answers 409.
    """
    specialties = {Subject.parse(text) for text in request.specialties}
    tutor = get_tuition_system().add_tutor(Tutor(request.name, specialties))
    return TutorResponse(data=tutor_to_dict(tutor))


@router.get("/tutors", response_model=TutorListResponse)
async def list_tutors():
    return TutorListResponse(data=[tutor_to_dict(t) for t in get_tuition_system().get_tutors()])


@router.get("/tutors/{name}", response_model=TutorResponse)
async def get_tutor(name: str = Path(..., description="Exact tutor name (case-sensitive)")):
    return TutorResponse(data=tutor_to_dict(lookup_tutor(name)))


@router.put("/tutors/{name}/availability", response_model=TutorResponse)
async def set_tutor_availability(request: AvailabilityRequest, name: str = Path(...)):
    """Set or overwrite a tutor's availability for one hour"""
    tutor = lookup_tutor(name)
    get_tuition_system().set_availability(tutor, request.hour, request.available)
    return TutorResponse(data=tutor_to_dict(tutor))
