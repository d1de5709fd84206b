"""Tests for the Jira user lookup."""


def test_find_user_returns_first_with_account_id(jira_fetcher):
    jira_fetcher.jira.get.return_value = [
        {"displayName": "App user"},
        {"accountId": "acc-9", "displayName": "Jane Doe", "emailAddress": "jane@x.io"},
        {"accountId": "acc-10", "displayName": "Jane Other"},
    ]

    user = jira_fetcher.find_user("jane")

    assert user is not None
    assert user.account_id == "acc-9"
    assert user.display_name == "Jane Doe"
    jira_fetcher.jira.get.assert_called_once_with(
        "rest/api/3/user/search", params={"query": "jane"}
    )


def test_find_user_no_match(jira_fetcher):
    jira_fetcher.jira.get.return_value = []
    assert jira_fetcher.find_user("nobody") is None


def test_find_user_unexpected_response(jira_fetcher):
    jira_fetcher.jira.get.return_value = {"errorMessages": []}
    assert jira_fetcher.find_user("jane") is None
