import click
from flask import current_app

from province_portal.extensions import db
from province_portal.models.admin_user import ROLES, AdminUser
from province_portal.domain.invariants.credentials import assert_new_password, assert_username
from province_portal.domain.invariants.exceptions import InvariantViolation


@click.command("create-admin")
@click.argument("username")
@click.option("--role", type=click.Choice(ROLES), default="admin", show_default=True)
@click.password_option()
def create_admin(username, role, password):
    """Create an admin account, or reset the password of an existing one."""
    try:
        assert_username(username)
        assert_new_password(
            password,
            password,
            min_length=current_app.config["MIN_PASSWORD_LENGTH"],
            field="password",
        )
    except InvariantViolation as exc:
        raise click.BadParameter(str(exc)) from exc

    user = AdminUser.query.filter_by(username=username).first()
    created = user is None
    if created:
        user = AdminUser()
        user.username = username
        db.session.add(user)

    user.role = role
    user.failed_attempts = 0
    user.locked_until = None
    user.set_password(password)
    db.session.commit()

    click.echo(f"{'Created' if created else 'Updated'} {role} account '{username}'")


def register_cli(app):
    app.cli.add_command(create_admin)
