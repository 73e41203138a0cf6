from typing import AsyncGenerator, List, Optional

import strawberry
from strawberry.file_uploads import Upload
from strawberry.types import Info

from app.core.pubsub import EMPLOYEE_DELETED, EMPLOYEE_UPDATED, pubsub
from app.graphql.inputs import (
    CreateAttendanceInput,
    CreateEmployeeInput,
    UpdateAttendanceInput,
    UpdateEmployeeInput,
    to_schema,
)
from app.graphql.permissions import current_principal, guarded
from app.graphql.types import AttendanceType, EmployeeDeletedType, EmployeeType
from app.policies.handlers import (
    CreateEmployeePolicyHandler,
    DeleteEmployeePolicyHandler,
    ReadAttendancePolicyHandler,
    ReadEmployeePolicyHandler,
    UpdateEmployeePolicyHandler,
)
from app.schemas.employees import AttendanceCreate, AttendanceUpdate, EmployeeCreate, EmployeeUpdate
from app.services import employee_service


def _publish_updated(employee) -> None:
    pubsub.publish(EMPLOYEE_UPDATED, EmployeeType.from_model(employee))


@strawberry.type
class EmployeeQuery:
    @strawberry.field(name="getEmployees", permission_classes=guarded(ReadEmployeePolicyHandler))
    def employees(self, info: Info) -> List[EmployeeType]:
        principal = current_principal(info)
        return employee_service.get_employees(info.context["db"], principal.business_id)

    @strawberry.field(name="getEmployee", permission_classes=guarded(ReadEmployeePolicyHandler))
    def employee(self, info: Info, id: strawberry.ID) -> EmployeeType:
        principal = current_principal(info)
        return employee_service.get_employee(info.context["db"], id, principal.business_id)

    @strawberry.field(name="getAllAttendance", permission_classes=guarded(ReadAttendancePolicyHandler))
    def all_attendance(self, info: Info) -> List[AttendanceType]:
        principal = current_principal(info)
        return employee_service.get_attendance(info.context["db"], principal.business_id)

    @strawberry.field(name="getAttendance", permission_classes=guarded(ReadAttendancePolicyHandler))
    def attendance(self, info: Info, id: strawberry.ID) -> AttendanceType:
        principal = current_principal(info)
        return employee_service.get_attendance_by_id(info.context["db"], id, principal.business_id)


@strawberry.type
class EmployeeMutation:
    @strawberry.mutation(name="createEmployee", permission_classes=guarded(CreateEmployeePolicyHandler))
    async def create_employee(
        self,
        info: Info,
        create_employee_input: CreateEmployeeInput,
        avatar: Optional[Upload] = None,
    ) -> EmployeeType:
        principal = current_principal(info)
        return await employee_service.register_employee(
            info.context["db"],
            to_schema(EmployeeCreate, create_employee_input),
            principal.business_id,
            avatar,
            info.context["storage"],
        )

    @strawberry.mutation(name="updateEmployee", permission_classes=guarded(UpdateEmployeePolicyHandler))
    def update_employee(
        self, info: Info, id: strawberry.ID, update_employee_input: UpdateEmployeeInput
    ) -> EmployeeType:
        principal = current_principal(info)
        db_employee = employee_service.update_employee(
            info.context["db"], id, to_schema(EmployeeUpdate, update_employee_input), principal.business_id
        )
        _publish_updated(db_employee)
        return db_employee

    @strawberry.mutation(name="updateEmployeeAvatar", permission_classes=guarded(UpdateEmployeePolicyHandler))
    async def update_employee_avatar(self, info: Info, id: strawberry.ID, avatar: Upload) -> bool:
        principal = current_principal(info)
        db = info.context["db"]
        updated = await employee_service.update_employee_avatar(
            db, id, avatar, info.context["storage"], principal.business_id
        )
        _publish_updated(employee_service.get_employee(db, id, principal.business_id))
        return updated

    @strawberry.mutation(name="deleteEmployeeAvatar", permission_classes=guarded(UpdateEmployeePolicyHandler))
    def delete_employee_avatar(self, info: Info, id: strawberry.ID) -> bool:
        principal = current_principal(info)
        db = info.context["db"]
        deleted = employee_service.delete_employee_avatar(db, id, info.context["storage"], principal.business_id)
        _publish_updated(employee_service.get_employee(db, id, principal.business_id))
        return deleted

    @strawberry.mutation(name="createAttendance", permission_classes=guarded(UpdateEmployeePolicyHandler))
    def clock_in_employee(
        self, info: Info, id: strawberry.ID, clock_in_input: Optional[CreateAttendanceInput] = None
    ) -> EmployeeType:
        principal = current_principal(info)
        attendance_data = to_schema(AttendanceCreate, clock_in_input) if clock_in_input else AttendanceCreate()
        db_employee = employee_service.clock_in(info.context["db"], id, attendance_data, principal.business_id)
        _publish_updated(db_employee)
        return db_employee

    @strawberry.mutation(name="updateAttendance", permission_classes=guarded(UpdateEmployeePolicyHandler))
    def clock_out_employee(
        self,
        info: Info,
        employee_id: strawberry.ID,
        attendance_id: strawberry.ID,
        clock_out_input: Optional[UpdateAttendanceInput] = None,
    ) -> EmployeeType:
        principal = current_principal(info)
        attendance_update = to_schema(AttendanceUpdate, clock_out_input) if clock_out_input else AttendanceUpdate()
        db_employee = employee_service.clock_out(
            info.context["db"], employee_id, attendance_id, attendance_update, principal.business_id
        )
        _publish_updated(db_employee)
        return db_employee

    @strawberry.mutation(name="deleteEmployee", permission_classes=guarded(DeleteEmployeePolicyHandler))
    def delete_employee(self, info: Info, id: strawberry.ID) -> bool:
        principal = current_principal(info)
        deleted = employee_service.delete_employee(info.context["db"], id, principal.business_id)
        pubsub.publish(EMPLOYEE_DELETED, EmployeeDeletedType(id=id, business_id=principal.business_id))
        return deleted


@strawberry.type
class EmployeeSubscription:
    @strawberry.subscription(name="employeeUpdated", permission_classes=guarded(ReadEmployeePolicyHandler))
    async def employee_updated(self, info: Info) -> AsyncGenerator[EmployeeType, None]:
        business_id = current_principal(info).business_id
        async for employee in pubsub.subscribe(EMPLOYEE_UPDATED):
            if employee.business_id == business_id:
                yield employee

    @strawberry.subscription(name="employeeDeleted", permission_classes=guarded(ReadEmployeePolicyHandler))
    async def employee_deleted(self, info: Info) -> AsyncGenerator[EmployeeDeletedType, None]:
        business_id = current_principal(info).business_id
        async for event in pubsub.subscribe(EMPLOYEE_DELETED):
            if event.business_id == business_id:
                yield event
