import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def delivery_bed():
    from delivery.domain import delivery

    bed = DomainFixture(delivery)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(delivery_bed):
    with delivery_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _assignment_policy():
    """Every test starts from the permissive default, whatever the environment says."""
    from delivery.config import AssignmentPolicy, reset_assignment_policy, set_assignment_policy

    set_assignment_policy(AssignmentPolicy.PERMISSIVE)
    yield
    reset_assignment_policy()
