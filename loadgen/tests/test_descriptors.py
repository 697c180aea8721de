import dataclasses
import unittest

from loadgen import descriptors as d


class DescriptorTests(unittest.TestCase):
    def test_params_shapes(self) -> None:
        self.assertEqual(d.SubscriptionDescriptor("s").params(), ())
        self.assertEqual(d.SubscriptionDescriptor("s", "evt").params(), ("evt",))
        self.assertEqual(d.SubscriptionDescriptor("s", "evt", False).params(), ("evt", False))
        self.assertEqual(
            d.SubscriptionDescriptor("s", "evt", d.NO_COLLECTION).params(),
            ("evt", {"useCollection": False, "args": []}),
        )

    def test_descriptors_are_immutable(self) -> None:
        descriptor = d.SubscriptionDescriptor("s", "evt")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            descriptor.stream = "other"  # type: ignore[misc]
        call = d.MethodCallDescriptor.of("m", 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            call.method = "other"  # type: ignore[misc]

    def test_for_user_prefixes_qualifier(self) -> None:
        addressed = d.NOTIFY_USER_EVENTS[0].for_user("abc")
        self.assertEqual(addressed.qualifier, "abc/message")
        self.assertEqual(d.NOTIFY_USER_EVENTS[0].qualifier, "message")

    def test_table_sizes(self) -> None:
        self.assertEqual(len(d.HANDSHAKE_METHODS), 2)
        self.assertEqual(len(d.HANDSHAKE_SUBSCRIPTIONS), 2)
        self.assertEqual(len(d.NOTIFY_ALL_EVENTS), 3)
        self.assertEqual(len(d.NOTIFY_LOGGED_EVENTS), 7)
        self.assertEqual(len(d.NOTIFY_USER_EVENTS), 7)
        self.assertEqual(len(d.LOGIN_SUBSCRIPTIONS), 14)
        self.assertEqual(len(d.login_methods("pt-BR")), 7)

    def test_login_subscriptions_disable_collections(self) -> None:
        streams = {descriptor.stream for descriptor in d.LOGIN_SUBSCRIPTIONS}
        self.assertEqual(streams, {"stream-notify-all", "stream-notify-logged", "stream-importers", "stream-apps"})
        for descriptor in d.LOGIN_SUBSCRIPTIONS:
            self.assertEqual(descriptor.params()[1], {"useCollection": False, "args": []})

    def test_login_methods_carry_locale(self) -> None:
        self.assertEqual(d.login_methods("en")[-1], d.MethodCallDescriptor("loadLocale", ("en",)))

    def test_room_subscriptions(self) -> None:
        self.assertEqual(
            [descriptor.params() for descriptor in d.room_subscriptions("r1")],
            [("r1",), ("r1/typing",), ("r1/deleteMessage",)],
        )


if __name__ == "__main__":
    unittest.main()
