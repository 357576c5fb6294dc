
from .base import BaseCustomHTTPException
from .s401 import InvalidCredentialsException, UnauthenticatedException
from .s403 import (MembersOnlyException, NotAuthorizedException,
                   NotProjectMemberException, OwnerOnlyException,
                   PrivateTemplateException, ProjectNotOwnedException,
                   TemplateCreatorOnlyException)
from .s404 import (MemberNotFoundException, NotFoundException,
                   ProjectNotFoundException, TagNotFoundException,
                   TaskNotFoundException, TemplateNotFoundException,
                   UserNotFoundException)
from .s409 import (ArchivedProjectException, ConflictException,
                   InvalidStateException, OwnerMembershipException,
                   UserAlreadyExistsException, UserAlreadyMemberException)
