from typing import List

import strawberry
from strawberry.file_uploads import Upload
from strawberry.types import Info

from app.core.security import clear_auth_cookie, issue_auth_cookie
from app.graphql.inputs import CreateAdminInput, LoginAdminInput, UpdateAdminInput, to_schema
from app.graphql.permissions import current_principal, guarded
from app.graphql.types import AdminType
from app.policies.handlers import DeleteAdminPolicyHandler, ReadAdminPolicyHandler, UpdateAdminPolicyHandler
from app.schemas.admin import AdminCreate, AdminLogin, AdminUpdate
from app.services import admin_service


@strawberry.type
class AdminQuery:
    @strawberry.field(name="getAdmins", permission_classes=guarded(ReadAdminPolicyHandler))
    def admins(self, info: Info) -> List[AdminType]:
        """All admins of the caller's business"""
        principal = current_principal(info)
        return admin_service.get_admins(info.context["db"], principal.business_id)

    @strawberry.field(name="getAdminProfile", permission_classes=guarded(ReadAdminPolicyHandler))
    def profile(self, info: Info) -> AdminType:
        principal = current_principal(info)
        return admin_service.get_admin(info.context["db"], principal.id)

    @strawberry.field(name="getAdminById", permission_classes=guarded(ReadAdminPolicyHandler))
    def admin(self, info: Info, id: strawberry.ID) -> AdminType:
        principal = current_principal(info)
        return admin_service.get_admin(info.context["db"], id, principal.business_id)

    @strawberry.field(name="logoutAdmin")
    def logout_admin(self, info: Info) -> bool:
        clear_auth_cookie(info.context["response"])
        return True


@strawberry.type
class AdminMutation:
    @strawberry.mutation(name="createAdmin")
    def create_admin(self, info: Info, create_admin_input: CreateAdminInput) -> AdminType:
        db_admin = admin_service.register_admin(info.context["db"], to_schema(AdminCreate, create_admin_input))
        issue_auth_cookie(info.context["response"], db_admin)
        return db_admin

    @strawberry.mutation(name="loginAdmin")
    def login_admin(self, info: Info, login_admin_input: LoginAdminInput) -> AdminType:
        db_admin = admin_service.login_admin(info.context["db"], to_schema(AdminLogin, login_admin_input))
        issue_auth_cookie(info.context["response"], db_admin)
        return db_admin

    @strawberry.mutation(name="updateAdmin", permission_classes=guarded(UpdateAdminPolicyHandler))
    def update_admin(self, info: Info, id: strawberry.ID, update_admin_input: UpdateAdminInput) -> AdminType:
        principal = current_principal(info)
        return admin_service.update_admin(
            info.context["db"], id, to_schema(AdminUpdate, update_admin_input), principal.business_id
        )

    @strawberry.mutation(name="updateAdminAvatar", permission_classes=guarded(UpdateAdminPolicyHandler))
    async def update_admin_avatar(self, info: Info, id: strawberry.ID, avatar: Upload) -> bool:
        principal = current_principal(info)
        return await admin_service.update_admin_avatar(
            info.context["db"], id, avatar, info.context["storage"], principal.business_id
        )

    @strawberry.mutation(name="deleteAdminAvatar", permission_classes=guarded(UpdateAdminPolicyHandler))
    def delete_admin_avatar(self, info: Info, id: strawberry.ID) -> bool:
        principal = current_principal(info)
        return admin_service.delete_admin_avatar(
            info.context["db"], id, info.context["storage"], principal.business_id
        )

    @strawberry.mutation(name="deleteAdmin", permission_classes=guarded(DeleteAdminPolicyHandler))
    def delete_admin(self, info: Info, id: strawberry.ID) -> bool:
        principal = current_principal(info)
        deleted = admin_service.delete_admin(info.context["db"], id, principal.business_id)
        clear_auth_cookie(info.context["response"])
        return deleted
