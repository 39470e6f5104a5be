from __future__ import annotations

from pathlib import Path


def test_studly_table_names() -> None:
    from pollinate.jobs import studly

    assert studly("users") == "Users"
    assert studly("user_roles") == "UserRoles"
    assert studly("order-items") == "OrderItems"
    assert studly("oauth_access_tokens") == "OauthAccessTokens"
    assert studly("userROLES") == "UserROLES"
    assert studly("public.audit log") == "PublicAuditLog"


def test_build_job_names_file_and_type() -> None:
    from pollinate.jobs import build_job

    job = build_job(Path("/seeds"), "pollinate", "user_roles")
    assert job.type_name == "pollinate_UserRoles"
    assert job.path == Path("/seeds/pollinate_UserRoles.py")
    assert job.table_name == "user_roles"


def test_build_jobs_skips_tables_that_collide_on_file_name() -> None:
    from pollinate.jobs import build_jobs

    jobs = build_jobs(Path("/seeds"), "seed", ["user_roles", "UserRoles", "orders"])
    assert [j.table_name for j in jobs] == ["user_roles", "orders"]
