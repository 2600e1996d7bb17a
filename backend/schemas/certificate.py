from datetime import datetime

from schemas.base import CamelModel

class CertificateResponse(CamelModel):
    id: str
    user_id: str
    course_id: str
    user_assessment_id: str
    certificate_url: str
    issued_at: datetime
