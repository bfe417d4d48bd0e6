import unittest

from flight_finder import FinderConfig, SnapshotFetchError, extract_snapshot, run_finder_workflow

SNAPSHOT = (
    "Title: search\n"
    "Average flight time | 2 hours 55 minutes\n"
    "Markdown Content:\n"
    "[### Pricey Flight](https://www.example.com/b)\n"
    "Lisbon trip €350 economy\n"
    "[### Cheap Flight](https://example.com/a)\n"
    "Fly for £199 only!\n"
)


class WorkflowTests(unittest.TestCase):
    def test_extract_snapshot_orders_offers_and_reads_summary(self) -> None:
        result = extract_snapshot(SNAPSHOT)

        self.assertEqual([offer.title for offer in result.offers], ["Cheap Flight", "Pricey Flight"])
        self.assertEqual(result.best_offer.title, "Cheap Flight")
        self.assertEqual(result.summary.duration, "2 hours 55 minutes")

    def test_display_limit_is_applied(self) -> None:
        result = extract_snapshot(SNAPSHOT, FinderConfig(display_limit=1))

        self.assertEqual(len(result.offers), 1)
        self.assertEqual(result.total_offers, 2)

    def test_run_finder_workflow_with_injected_fetcher(self) -> None:
        seen_configs = []

        def fetcher(config: FinderConfig) -> str:
            seen_configs.append(config)
            return SNAPSHOT

        config = FinderConfig()
        outcome = run_finder_workflow(config, fetcher=fetcher)

        self.assertEqual(seen_configs, [config])
        self.assertEqual(outcome.statistics["count"], 2)
        self.assertIn("Lowest snapshot fare: £199 (example.com)", outcome.report)
        payload = outcome.to_dict()
        self.assertEqual(payload["best_offer"]["url"], "https://example.com/a")
        self.assertEqual(payload["config"]["origin"], "Manchester")

    def test_fetch_failure_propagates(self) -> None:
        def fetcher(config: FinderConfig) -> str:
            raise SnapshotFetchError("Failed to fetch travel snapshot (500)", status_code=500)

        with self.assertRaises(SnapshotFetchError):
            run_finder_workflow(FinderConfig(), fetcher=fetcher)

    def test_empty_snapshot(self) -> None:
        outcome = run_finder_workflow(FinderConfig(), fetcher=lambda config: "nothing to see")

        self.assertEqual(outcome.result.offers, [])
        self.assertIsNone(outcome.result.best_offer)
        self.assertIn("No live fares found", outcome.report)


if __name__ == "__main__":
    unittest.main()
