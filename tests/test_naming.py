"""
Тесты построения имён для операций без operationId
"""

import pytest

from late_client.internal.utils import (
    class_name,
    docstring_text,
    namespace_from_tag,
    synthesize_method_name,
)


class TestSynthesizeMethodName:
    """Тесты запасного имени метода"""

    @pytest.mark.parametrize(
        "path, method, expected",
        [
            ("/v1/posts", "get", "listPosts"),
            ("/v1/posts/{postId}", "get", "getPostsByPostId"),
            ("/v1/posts", "post", "createPosts"),
            ("/v1/posts/{postId}", "put", "updatePostsByPostId"),
            ("/v1/posts/{postId}", "patch", "updatePostsByPostId"),
            ("/v1/posts/{postId}", "delete", "deletePostsByPostId"),
            ("/v1/posts/{postId}/retry", "post", "createPostsByPostIdRetry"),
            ("/v1/api-keys/{key_id}", "delete", "deleteApiKeysByKeyId"),
            ("/v2/queue/next-slot", "get", "listQueueNextSlot"),
        ],
    )
    def test_names(self, path, method, expected):
        assert synthesize_method_name(path, method) == expected

    def test_root_path(self):
        """Пустой путь даёт только префикс"""
        assert synthesize_method_name("/", "get") == "list"

    def test_deterministic(self):
        first = synthesize_method_name("/v1/accounts/{accountId}/health", "get")
        second = synthesize_method_name("/v1/accounts/{accountId}/health", "get")

        assert first == second == "getAccountsByAccountIdHealth"


class TestNamespaceNames:
    """Тесты имён namespace-ов и классов"""

    def test_unknown_tag(self):
        assert namespace_from_tag("Team Members") == "teammembers"
        assert namespace_from_tag("  Drafts ") == "drafts"

    def test_non_identifier_characters(self):
        assert namespace_from_tag("Ads-Manager") == "adsmanager"
        assert namespace_from_tag("!!!") == "other"

    def test_class_name(self):
        assert class_name("accountGroups") == "AccountGroups"
        assert class_name("googleBusiness", parent="Connect") == "ConnectGoogleBusiness"

    def test_docstring_text(self):
        assert docstring_text("Create a post\n\nLong description") == "Create a post"
        assert docstring_text('Say "hi"') == 'Say \\"hi\\"'
        assert docstring_text("   ") == ""
