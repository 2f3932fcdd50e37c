"""
Tests for the key-casing transformer.
Run from the project root: python -m pytest tests/test_case.py -v
"""
import copy
import unittest

from utils.case import dict_keys_to_camel, to_camel_key


class TestToCamelKey(unittest.TestCase):
    def test_underscore_and_hyphen(self):
        self.assertEqual(to_camel_key("site_admin"), "siteAdmin")
        self.assertEqual(to_camel_key("avatar-url"), "avatarUrl")
        self.assertEqual(to_camel_key("received_events_url"), "receivedEventsUrl")

    def test_key_without_delimiter_unchanged(self):
        self.assertEqual(to_camel_key("login"), "login")
        self.assertEqual(to_camel_key("siteAdmin"), "siteAdmin")

    def test_delimiter_not_followed_by_letter_is_kept(self):
        self.assertEqual(to_camel_key("a_1"), "a_1")
        self.assertEqual(to_camel_key("trailing_"), "trailing_")
        self.assertEqual(to_camel_key("_private"), "Private")

    def test_consecutive_delimiters_only_last_is_consumed(self):
        self.assertEqual(to_camel_key("a__b"), "a_B")
        self.assertEqual(to_camel_key("a-_b"), "a-B")

    def test_uppercase_letter_after_delimiter(self):
        self.assertEqual(to_camel_key("node_ID"), "nodeID")


class TestDictKeysToCamel(unittest.TestCase):
    def test_nested_object(self):
        value = {"site_admin": True, "avatar-url": "x", "nested_obj": {"gravatar_id": "y"}}
        self.assertEqual(
            dict_keys_to_camel(value),
            {"siteAdmin": True, "avatarUrl": "x", "nestedObj": {"gravatarId": "y"}},
        )

    def test_list_of_objects(self):
        value = [{"node_id": "1"}, {"node_id": "2"}]
        self.assertEqual(dict_keys_to_camel(value), [{"nodeId": "1"}, {"nodeId": "2"}])

    def test_scalars_pass_through(self):
        for scalar in ("snake_case_value", 3, 2.5, True, False, None):
            self.assertIs(dict_keys_to_camel(scalar), scalar)

    def test_empty_containers(self):
        self.assertEqual(dict_keys_to_camel({}), {})
        self.assertEqual(dict_keys_to_camel([]), [])

    def test_string_values_are_not_rewritten(self):
        self.assertEqual(dict_keys_to_camel({"type_name": "user_type"}), {"typeName": "user_type"})

    def test_input_not_mutated(self):
        value = {"outer_key": [{"inner_key": 1}], "other_key": {"deep_key": None}}
        snapshot = copy.deepcopy(value)
        result = dict_keys_to_camel(value)
        self.assertEqual(value, snapshot)
        self.assertIsNot(result["outerKey"], value["outer_key"])

    def test_shape_preserved(self):
        value = {"items_list": [{"a_b": 1, "c_d": [1, 2, {"e_f": 3}]}, {}], "total_count": 2}
        result = dict_keys_to_camel(value)
        self.assertEqual(len(result), len(value))
        self.assertEqual(len(result["itemsList"]), 2)
        self.assertEqual(len(result["itemsList"][0]), 2)
        self.assertEqual(result["itemsList"][0]["cD"], [1, 2, {"eF": 3}])

    def test_idempotent_on_camel_case(self):
        value = {"siteAdmin": True, "nestedObj": [{"gravatarId": "y"}]}
        once = dict_keys_to_camel(value)
        self.assertEqual(dict_keys_to_camel(once), once)
        self.assertEqual(once, value)

    def test_preserves_key_order(self):
        result = dict_keys_to_camel({"z_last": 1, "a_first": 2, "m_mid": 3})
        self.assertEqual(list(result), ["zLast", "aFirst", "mMid"])


if __name__ == "__main__":
    unittest.main()
