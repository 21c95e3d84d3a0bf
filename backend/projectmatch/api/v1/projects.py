"""Project API endpoints — catalogue, search, bookmarks and applications."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from projectmatch.dependencies.services import (
    get_project_service,
    get_relationship_manager,
    get_search_engine,
)
from projectmatch.schemas.job_title import JobTitleRead
from projectmatch.schemas.project import (
    ProjectCreate,
    ProjectPage,
    ProjectRead,
    ProjectUpdate,
    SearchCriteria,
)
from projectmatch.schemas.user_project import (
    Applicant,
    ApplicationPayload,
    RelationshipStatusPayload,
    UserProjectRead,
)
from projectmatch.services import ProjectSearchEngine, ProjectService, RelationshipManager

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectRead])
async def list_projects(service: ProjectService = Depends(get_project_service)):
    """List all projects, newest first."""
    return await service.list_projects()


@router.get("/search", response_model=ProjectPage)
async def search_projects(
    engine: ProjectSearchEngine = Depends(get_search_engine),
    keyword: str | None = Query(None, description="Search in title and description"),
    job_titles: list[int] | None = Query(None, description="Job title ids (any)"),
    skills: list[int] | None = Query(None, description="Skill ids (any)"),
    project_status: str | None = Query(None, alias="status", description="A-Active, C-Closed"),
    remote: str | None = Query(None, description="Y-remote, N-on site"),
    page: int = Query(0, description="Zero-based results page"),
    size: int | None = Query(None, description="Number of records per page"),
):
    """Search projects by keyword, job titles, skills, status and location."""
    criteria = SearchCriteria(
        keyword=keyword,
        job_titles=job_titles,
        skills=skills,
        status=project_status,
        remote=remote,
        page=page,
        size=size,
    )
    return await engine.search(criteria)


@router.get("/organization", response_model=list[ProjectRead])
async def list_projects_by_organization(
    organization_id: int = Query(..., description="ID of an organization"),
    project_status: str | None = Query(None, description="N-New, A-Active, C-Closed"),
    service: ProjectService = Depends(get_project_service),
):
    """List an organization's projects, optionally filtered by status."""
    return await service.list_by_organization(organization_id, project_status)


@router.get("/job-titles", response_model=list[JobTitleRead])
async def list_job_titles(service: ProjectService = Depends(get_project_service)):
    return await service.list_job_titles()


@router.get("/user", response_model=list[ProjectRead])
async def list_user_projects(
    user_id: int = Query(..., description="User ID"),
    user_project_status: str | None = Query(
        None, description="A-Applied, B-Bookmarked, C-Accepted, D-Declined; omit for all"
    ),
    manager: RelationshipManager = Depends(get_relationship_manager),
):
    """Projects bound to a user, most recently bound first."""
    return await manager.get_by_user_and_status(user_id, user_project_status)


@router.post("/applications", response_model=UserProjectRead, status_code=status.HTTP_201_CREATED)
async def create_application(
    application: ApplicationPayload,
    manager: RelationshipManager = Depends(get_relationship_manager),
):
    """Bookmark or apply to a project."""
    return await manager.create(
        application.user_id,
        application.project_id,
        application.status,
        application.comment,
        application.resume_flag,
    )


@router.put("/applications", response_model=UserProjectRead)
async def update_application(
    application: ApplicationPayload,
    manager: RelationshipManager = Depends(get_relationship_manager),
):
    """Move an existing bookmark or application to a new status."""
    return await manager.update(application)


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    return await service.get_project(project_id)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(data: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    return await service.create_project(data)


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
):
    return await service.update_project(project_id, data)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    await service.delete_project(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{project_id}/image", status_code=status.HTTP_204_NO_CONTENT)
async def save_project_image(
    project_id: int,
    img_url: str = Query(..., description="Image URL"),
    service: ProjectService = Depends(get_project_service),
):
    await service.save_image(project_id, img_url)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/applicants", response_model=list[Applicant])
async def list_applicants(
    project_id: int,
    manager: RelationshipManager = Depends(get_relationship_manager),
):
    """Applicants of a project, most recent application first."""
    return await manager.get_applicants(project_id)


@router.post(
    "/{project_id}/users/{user_id}",
    response_model=UserProjectRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_user_project(
    project_id: int,
    user_id: int,
    payload: RelationshipStatusPayload,
    request: Request,
    response: Response,
    manager: RelationshipManager = Depends(get_relationship_manager),
):
    """Create or replace the relation between a user and a project."""
    user_project = await manager.create(
        user_id, project_id, payload.status, payload.comment, payload.resume_flag
    )
    response.headers["Location"] = str(
        request.url_for("create_user_project", project_id=project_id, user_id=user_id)
    )
    return user_project
