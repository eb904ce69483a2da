from .auth import router as auth_router
from .course import router as course_router
from .enrollment import router as enrollment_router

routes = [
    auth_router,
    course_router,
    enrollment_router,
]
