
from .project import AddMemberSchema, CreateProjectSchema, ProjectSchema
from .tag import CreateTagSchema, TagSchema, UpdateTagSchema
from .task import CreateTaskSchema, TaskSchema, UpdateTaskSchema
from .template import (CreateTaskFromTemplateSchema, CreateTemplateSchema,
                       TemplateSchema, UpdateTemplateSchema)
from .user import AuthPayloadSchema, CredsSchema, RegisterSchema, UserSchema
