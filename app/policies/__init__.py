from app.policies.ability import Ability, Action, Principal, Role, Subject, define_ability_for

__all__ = ["Ability", "Action", "Principal", "Role", "Subject", "define_ability_for"]
