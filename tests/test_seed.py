from appointments.models import Business, Service, User


def test_seed_command_creates_demo_data(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed"])
    assert result.exit_code == 0
    assert "owner@example.com" in result.output

    owner = User.query.filter_by(email="owner@example.com").one()
    assert owner.check_password("owner123")
    business = Business.query.filter_by(owner_id=owner.id).one()
    assert business.opening_time == "09:00"
    assert Service.query.filter_by(business_id=business.id).count() == 3


def test_seed_is_idempotent(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["seed"])
    runner.invoke(args=["seed"])

    assert User.query.count() == 2
    assert Business.query.count() == 1
    assert Service.query.count() == 3
