import pytest

from manifest_garden.services.profile_service import ProfileService


@pytest.fixture
def profile_service(profile_repo):
    return ProfileService(profile_repo, "Dreamer")


async def test_default_profile(profile_service):
    profile = await profile_service.get_profile()
    assert profile.username == "Dreamer"
    assert profile.is_premium is False
    assert profile.current_streak == 0


async def test_update_profile(profile_service):
    await profile_service.update_profile(username="  Luna ")
    profile = await profile_service.update_profile(is_premium=True)
    assert profile.username == "Luna"
    assert profile.is_premium is True


@pytest.mark.parametrize("username", ["", "   ", "x" * 51])
async def test_username_length(profile_service, username):
    with pytest.raises(ValueError):
        await profile_service.update_profile(username=username)
