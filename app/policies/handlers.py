from app.policies.ability import Ability, Action, Subject


class PolicyHandler:
    """A static (action, subject) check run before a resolver"""
    action: Action
    subject: Subject

    def handle(self, ability: Ability) -> bool:
        return ability.can(self.action, self.subject)


# Admin
class ReadAdminPolicyHandler(PolicyHandler):
    action, subject = Action.READ, Subject.ADMIN


class UpdateAdminPolicyHandler(PolicyHandler):
    action, subject = Action.UPDATE, Subject.ADMIN


class DeleteAdminPolicyHandler(PolicyHandler):
    action, subject = Action.DELETE, Subject.ADMIN


# Customer
class ManageCustomerPolicyHandler(PolicyHandler):
    action, subject = Action.MANAGE, Subject.CUSTOMER


class ReadCustomerPolicyHandler(PolicyHandler):
    action, subject = Action.READ, Subject.CUSTOMER


class UpdateCustomerPolicyHandler(PolicyHandler):
    action, subject = Action.UPDATE, Subject.CUSTOMER


class DeleteCustomerPolicyHandler(PolicyHandler):
    action, subject = Action.DELETE, Subject.CUSTOMER


class CreateCartPolicyHandler(PolicyHandler):
    action, subject = Action.CREATE, Subject.CART


class UpdateCartPolicyHandler(PolicyHandler):
    action, subject = Action.UPDATE, Subject.CART


class DeleteCartPolicyHandler(PolicyHandler):
    action, subject = Action.DELETE, Subject.CART


# Employee
class CreateEmployeePolicyHandler(PolicyHandler):
    action, subject = Action.CREATE, Subject.EMPLOYEE


class ReadEmployeePolicyHandler(PolicyHandler):
    action, subject = Action.READ, Subject.EMPLOYEE


class UpdateEmployeePolicyHandler(PolicyHandler):
    action, subject = Action.UPDATE, Subject.EMPLOYEE


class DeleteEmployeePolicyHandler(PolicyHandler):
    action, subject = Action.DELETE, Subject.EMPLOYEE


class ReadAttendancePolicyHandler(PolicyHandler):
    action, subject = Action.READ, Subject.ATTENDANCE


# Product
class CreateProductPolicyHandler(PolicyHandler):
    action, subject = Action.CREATE, Subject.PRODUCT


class ReadProductPolicyHandler(PolicyHandler):
    action, subject = Action.READ, Subject.PRODUCT


class UpdateProductPolicyHandler(PolicyHandler):
    action, subject = Action.UPDATE, Subject.PRODUCT


class DeleteProductPolicyHandler(PolicyHandler):
    action, subject = Action.DELETE, Subject.PRODUCT


# Sale
class CreateSalePolicyHandler(PolicyHandler):
    action, subject = Action.CREATE, Subject.SALE


class ReadSalePolicyHandler(PolicyHandler):
    action, subject = Action.READ, Subject.SALE


class UpdateSalePolicyHandler(PolicyHandler):
    action, subject = Action.UPDATE, Subject.SALE


class DeleteSalePolicyHandler(PolicyHandler):
    action, subject = Action.DELETE, Subject.SALE
