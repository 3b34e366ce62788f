"""Tests for metrics, bucket and pipeline aggregations."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.aggregations import (
    AvgAggregation,
    AvgBucketAggregation,
    BucketScriptAggregation,
    BucketSelectorAggregation,
    BucketSortAggregation,
    CardinalityAggregation,
    CompositeAggregation,
    CumulativeSumAggregation,
    DateHistogramAggregation,
    DateHistogramValuesSource,
    DateRangeAggregation,
    DerivativeAggregation,
    ExtendedStatsBucketAggregation,
    FilterAggregation,
    FiltersAggregation,
    GlobalAggregation,
    HistogramAggregation,
    HistogramValuesSource,
    MissingAggregation,
    MovingFunctionAggregation,
    NestedAggregation,
    PercentileRanksAggregation,
    PercentilesAggregation,
    PercentilesBucketAggregation,
    RangeAggregation,
    ReverseNestedAggregation,
    SerialDifferencingAggregation,
    SignificantTermsAggregation,
    TermsAggregation,
    TermsValuesSource,
    TopHitsAggregation,
    ValuesSource,
    WeightedAverageAggregation,
)
from ElasticBuilder.aggregations.bucket import HistogramOptions
from ElasticBuilder.core.aggregation import Aggregation
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.sort import Sort
from ElasticBuilder.queries import MatchAllQuery, TermQuery


class MyTypeAggregation(HistogramOptions, Aggregation):
    def __init__(self, name: str, field: str, interval: int) -> None:
        super().__init__(name, "my_type", field, interval)


class TestAggregationBase(unittest.TestCase):
    def test_name_required_at_serialization(self) -> None:
        agg = AvgAggregation(field="price")
        with self.assertRaises(ValueError) as ctx:
            agg.to_json()
        self.assertEqual(str(ctx.exception), "Aggregation name could not be determined")
        self.assertEqual(agg.name("avg_price").to_json(), {"avg_price": {"avg": {"field": "price"}}})

    def test_empty_type_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Aggregation("x", "")

    def test_sub_aggregations_and_meta(self) -> None:
        agg = (
            TermsAggregation("users", "user")
            .meta({"color": "blue"})
            .agg(AvgAggregation("avg_age", "age"))
            .aggs([AvgAggregation("avg_score", "score")])
        )
        self.assertEqual(
            agg.to_json(),
            {
                "users": {
                    "terms": {"field": "user"},
                    "meta": {"color": "blue"},
                    "aggs": {
                        "avg_age": {"avg": {"field": "age"}},
                        "avg_score": {"avg": {"field": "score"}},
                    },
                }
            },
        )

    def test_sub_aggregation_must_be_aggregation(self) -> None:
        with self.assertRaises(TypeError):
            TermsAggregation("users", "user").agg({"avg_age": {"avg": {"field": "age"}}})


class TestMetricsAggregations(unittest.TestCase):
    def test_script_source(self) -> None:
        agg = AvgAggregation("avg_grade").script(Script("source", "doc.grade.value")).missing(10)
        self.assertEqual(
            agg.to_json(),
            {"avg_grade": {"avg": {"script": {"source": "doc.grade.value"}, "missing": 10}}},
        )

    def test_cardinality_rejects_format(self) -> None:
        agg = CardinalityAggregation("authors", "author").precision_threshold(100)
        self.assertEqual(agg.to_json(), {"authors": {"cardinality": {"field": "author", "precision_threshold": 100}}})
        with self.assertRaises(ValueError) as ctx:
            agg.format("0.0")
        self.assertEqual(str(ctx.exception), "format is not supported in CardinalityAggregation")

    def test_percentiles(self) -> None:
        agg = PercentilesAggregation("load", "load_time").percents([95, 99]).tdigest(200)
        self.assertEqual(
            agg.to_json(),
            {"load": {"percentiles": {"field": "load_time", "percents": [95, 99], "tdigest": {"compression": 200}}}},
        )

    def test_percentile_ranks(self) -> None:
        agg = PercentileRanksAggregation("load_ranks", "load_time", [500, 600]).keyed(False).hdr(3)
        self.assertEqual(
            agg.to_json(),
            {
                "load_ranks": {
                    "percentile_ranks": {
                        "field": "load_time",
                        "values": [500, 600],
                        "keyed": False,
                        "hdr": {"number_of_significant_value_digits": 3},
                    }
                }
            },
        )

    def test_percentile_ranks_checks_values_and_rejects_format(self) -> None:
        with self.assertRaises(TypeError):
            PercentileRanksAggregation("r", "load_time").values(500)
        with self.assertRaises(ValueError) as ctx:
            PercentileRanksAggregation("r", "load_time").format("0.0")
        self.assertEqual(str(ctx.exception), "format is not supported in PercentileRanksAggregation")

    def test_top_hits(self) -> None:
        agg = TopHitsAggregation("top").sort(Sort("date", "desc")).size(1).source({"includes": ["title"]})
        self.assertEqual(
            agg.to_json(),
            {"top": {"top_hits": {"sort": [{"date": "desc"}], "size": 1, "_source": {"includes": ["title"]}}}},
        )
        for setter, arg in (("field", "f"), ("script", Script()), ("missing", 0), ("format", "x")):
            with self.assertRaises(ValueError):
                getattr(TopHitsAggregation("top"), setter)(arg)

    def test_weighted_average(self) -> None:
        agg = WeightedAverageAggregation("weighted_grade", "grade").weight(Script("source", "doc.w.value"), 1)
        self.assertEqual(
            agg.to_json(),
            {
                "weighted_grade": {
                    "weighted_avg": {
                        "value": {"field": "grade"},
                        "weight": {"script": {"source": "doc.w.value"}, "missing": 1},
                    }
                }
            },
        )
        agg.value(Script("source", "doc.g.value"))
        self.assertEqual(
            agg.to_json()["weighted_grade"]["weighted_avg"]["value"],
            {"script": {"source": "doc.g.value"}},
        )

    def test_weighted_average_rejects_other_sources(self) -> None:
        with self.assertRaises(TypeError):
            WeightedAverageAggregation("w").value(3)
        with self.assertRaises(ValueError):
            WeightedAverageAggregation("w").field("grade")


class TestHistogramAggregations(unittest.TestCase):
    def test_histogram(self) -> None:
        self.assertEqual(
            HistogramAggregation("my_agg", "my_field", 10).to_json(),
            {"my_agg": {"histogram": {"field": "my_field", "interval": 10}}},
        )

    def test_custom_type_reuses_histogram_options(self) -> None:
        self.assertEqual(
            MyTypeAggregation("my_agg", "my_field", 10).to_json(),
            {"my_agg": {"my_type": {"field": "my_field", "interval": 10}}},
        )

    def test_order_becomes_list(self) -> None:
        agg = HistogramAggregation("prices", "price", 50).order("_count").order("_key", "ASC")
        self.assertEqual(
            agg.to_json()["prices"]["histogram"]["order"],
            [{"_count": "desc"}, {"_key": "asc"}],
        )

    def test_order_rejects_bad_direction(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                HistogramAggregation("prices", "price", 50).order("_count", "up")

    def test_date_histogram(self) -> None:
        agg = DateHistogramAggregation("sales_over_time", "date").calendar_interval("1M").time_zone("-01:00")
        agg.extended_bounds("2024-01", "2024-12").format("yyyy-MM")
        self.assertEqual(
            agg.to_json(),
            {
                "sales_over_time": {
                    "date_histogram": {
                        "field": "date",
                        "calendar_interval": "1M",
                        "time_zone": "-01:00",
                        "extended_bounds": {"min": "2024-01", "max": "2024-12"},
                        "format": "yyyy-MM",
                    }
                }
            },
        )


class TestRangeAggregations(unittest.TestCase):
    def test_ranges(self) -> None:
        agg = RangeAggregation("price_ranges", "price").range({"to": 100}).ranges([{"from": 100, "to": 200}, {"from": 200}])
        self.assertEqual(
            agg.to_json(),
            {"price_ranges": {"range": {"field": "price", "ranges": [{"to": 100}, {"from": 100, "to": 200}, {"from": 200}]}}},
        )

    def test_empty_ranges_rejected_at_serialization(self) -> None:
        agg = DateRangeAggregation("range", "date")
        with self.assertRaises(ValueError) as ctx:
            agg.to_json()
        self.assertEqual(str(ctx.exception), "`ranges` cannot be empty.")

    def test_range_needs_a_bound(self) -> None:
        with self.assertRaises(ValueError):
            RangeAggregation("r", "price").range({"key": "cheap"})
        with self.assertRaises(TypeError):
            RangeAggregation("r", "price").range([0, 100])

    def test_date_range_time_zone(self) -> None:
        agg = DateRangeAggregation("range", "date").time_zone("CET").range({"to": "2016/02/01"})
        self.assertEqual(
            agg.to_json(),
            {"range": {"date_range": {"field": "date", "ranges": [{"to": "2016/02/01"}], "time_zone": "CET"}}},
        )


class TestOtherBucketAggregations(unittest.TestCase):
    def test_terms_options(self) -> None:
        agg = TermsAggregation("genres", "genre").size(5).order("_count", "asc").execution_hint("MAP")
        self.assertEqual(
            agg.to_json(),
            {"genres": {"terms": {"field": "genre", "size": 5, "order": {"_count": "asc"}, "execution_hint": "map"}}},
        )
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError):
                TermsAggregation("genres", "genre").collect_mode("sideways")

    def test_significant_terms(self) -> None:
        agg = (
            SignificantTermsAggregation("keywords", "text")
            .min_doc_count(10)
            .chi_square(include_negatives=False)
            .background_filter(TermQuery("text", "spain"))
        )
        self.assertEqual(
            agg.to_json(),
            {
                "keywords": {
                    "significant_terms": {
                        "field": "text",
                        "min_doc_count": 10,
                        "chi_square": {"include_negatives": False, "background_is_superset": True},
                        "background_filter": {"term": {"text": "spain"}},
                    }
                }
            },
        )

    def test_significant_terms_script_heuristic(self) -> None:
        agg = SignificantTermsAggregation("keywords", "text").script_heuristic(Script("source", "_subset_freq"))
        self.assertEqual(
            agg.to_json(),
            {"keywords": {"significant_terms": {"field": "text", "script_heuristic": {"script": {"source": "_subset_freq"}}}}},
        )
        with self.assertRaises(TypeError):
            SignificantTermsAggregation("k", "text").script_heuristic("_subset_freq")
        with self.assertRaises(TypeError):
            SignificantTermsAggregation("k", "text").background_filter({"term": {"text": "spain"}})
        with self.assertRaises(ValueError):
            SignificantTermsAggregation("k", "text").script(Script("source", "doc.text.value"))

    def test_filter_aggregation_body_is_query(self) -> None:
        agg = FilterAggregation("t_shirts", TermQuery("type", "t-shirt")).agg(AvgAggregation("avg_price", "price"))
        self.assertEqual(
            agg.to_json(),
            {
                "t_shirts": {
                    "filter": {"term": {"type": "t-shirt"}},
                    "aggs": {"avg_price": {"avg": {"field": "price"}}},
                }
            },
        )
        with self.assertRaises(ValueError):
            agg.field("type")

    def test_named_filters(self) -> None:
        agg = FiltersAggregation("messages").filter("errors", TermQuery("body", "error")).other_bucket(True, "rest")
        self.assertEqual(
            agg.to_json(),
            {
                "messages": {
                    "filters": {
                        "filters": {"errors": {"term": {"body": "error"}}},
                        "other_bucket": True,
                        "other_bucket_key": "rest",
                    }
                }
            },
        )

    def test_mixing_filter_styles_warns_and_overwrites(self) -> None:
        agg = FiltersAggregation("messages").anonymous_filter(MatchAllQuery())
        with self.assertLogs("ElasticBuilder", level="WARNING") as logs:
            agg.filter("errors", TermQuery("body", "error"))
        self.assertIn("Overwriting anonymous filters.", logs.output[-1])
        self.assertEqual(
            agg.to_json()["messages"]["filters"]["filters"],
            {"errors": {"term": {"body": "error"}}},
        )
        with self.assertLogs("ElasticBuilder", level="WARNING") as logs:
            agg.anonymous_filters([MatchAllQuery()])
        self.assertIn("Overwriting named filters.", logs.output[-1])
        self.assertEqual(agg.to_json()["messages"]["filters"]["filters"], [{"match_all": {}}])

    def test_missing_rejects_script(self) -> None:
        self.assertEqual(MissingAggregation("no_price", "price").to_json(), {"no_price": {"missing": {"field": "price"}}})
        with self.assertRaises(ValueError):
            MissingAggregation("no_price").script(Script())

    def test_nested_and_global(self) -> None:
        self.assertEqual(NestedAggregation("resellers", "resellers").to_json(), {"resellers": {"nested": {"path": "resellers"}}})
        self.assertEqual(ReverseNestedAggregation("top").to_json(), {"top": {"reverse_nested": {}}})
        self.assertEqual(GlobalAggregation("all").to_json(), {"all": {"global": {}}})


class TestCompositeAggregation(unittest.TestCase):
    def test_sources_keep_their_order(self) -> None:
        agg = (
            CompositeAggregation("my_buckets")
            .sources(
                DateHistogramValuesSource("date", "timestamp").calendar_interval("1d").format("yyyy-MM-dd"),
                TermsValuesSource("product", "product").order("DESC").missing_bucket(True),
                HistogramValuesSource("price", "price", 5),
            )
            .size(2)
            .after({"date": 1494288000000, "product": "mad max", "price": 10})
        )
        self.assertEqual(
            agg.to_json(),
            {
                "my_buckets": {
                    "composite": {
                        "sources": [
                            {
                                "date": {
                                    "date_histogram": {
                                        "field": "timestamp",
                                        "calendar_interval": "1d",
                                        "format": "yyyy-MM-dd",
                                    }
                                }
                            },
                            {"product": {"terms": {"field": "product", "order": "desc", "missing_bucket": True}}},
                            {"price": {"histogram": {"field": "price", "interval": 5}}},
                        ],
                        "size": 2,
                        "after": {"date": 1494288000000, "product": "mad max", "price": 10},
                    }
                }
            },
        )

    def test_empty_sources(self) -> None:
        self.assertEqual(CompositeAggregation("c").to_json(), {"c": {"composite": {"sources": []}}})

    def test_sources_are_type_checked(self) -> None:
        with self.assertRaises(TypeError):
            CompositeAggregation("c").sources({"product": {"terms": {"field": "product"}}})

    def test_script_source(self) -> None:
        source = TermsValuesSource("day").script(Script("source", "doc['timestamp'].value.dayOfWeek")).value_type("long")
        self.assertEqual(
            source.to_json(),
            {"day": {"terms": {"script": {"source": "doc['timestamp'].value.dayOfWeek"}, "value_type": "long"}}},
        )

    def test_invalid_order(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                TermsValuesSource("product", "product").order("up")
        self.assertIn("#_terms", str(ctx.exception))

    def test_empty_source_type_rejected(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            ValuesSource("", "product")
        self.assertEqual(str(ctx.exception), "ValuesSource `source_type` cannot be empty")


class TestPipelineAggregations(unittest.TestCase):
    def test_bucket_metric(self) -> None:
        agg = AvgBucketAggregation("avg_monthly_sales", "sales_per_month>sales").gap_policy("KEEP_VALUES")
        self.assertEqual(
            agg.to_json(),
            {"avg_monthly_sales": {"avg_bucket": {"buckets_path": "sales_per_month>sales", "gap_policy": "keep_values"}}},
        )

    def test_gap_policy_rejects_unknown(self) -> None:
        with self.assertLogs("ElasticBuilder", level="WARNING"):
            with self.assertRaises(ValueError) as ctx:
                DerivativeAggregation("d", "sales").gap_policy("interpolate")
        self.assertIn("derivative-aggregation", str(ctx.exception))

    def test_cumulative_sum_rejects_gap_policy(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            CumulativeSumAggregation("c", "sales").gap_policy("skip")
        self.assertEqual(str(ctx.exception), "gap_policy is not supported in CumulativeSumAggregation")

    def test_bucket_script(self) -> None:
        agg = BucketScriptAggregation("t_shirt_pct", {"tShirtSales": "t-shirts>sales", "totalSales": "total_sales"})
        agg.script("params.tShirtSales / params.totalSales * 100")
        self.assertEqual(
            agg.to_json(),
            {
                "t_shirt_pct": {
                    "bucket_script": {
                        "buckets_path": {"tShirtSales": "t-shirts>sales", "totalSales": "total_sales"},
                        "script": "params.tShirtSales / params.totalSales * 100",
                    }
                }
            },
        )
        with self.assertRaises(ValueError):
            BucketSelectorAggregation("s").format("0.0")

    def test_bucket_sort(self) -> None:
        agg = BucketSortAggregation("sort").sort([Sort("total_sales", "desc")]).size(3)
        self.assertEqual(
            agg.to_json(),
            {"sort": {"bucket_sort": {"sort": [{"total_sales": "desc"}], "size": 3}}},
        )
        with self.assertRaises(TypeError):
            BucketSortAggregation("sort").sort(["total_sales"])

    def test_extended_stats_and_percentiles_bucket(self) -> None:
        stats = ExtendedStatsBucketAggregation("stats_monthly_sales", "sales_per_month>sales").sigma(3)
        self.assertEqual(
            stats.to_json(),
            {"stats_monthly_sales": {"extended_stats_bucket": {"buckets_path": "sales_per_month>sales", "sigma": 3}}},
        )
        percentiles = PercentilesBucketAggregation("pct", "sales_per_month>sales").percents([25.0, 50.0, 75.0])
        self.assertEqual(
            percentiles.to_json(),
            {"pct": {"percentiles_bucket": {"buckets_path": "sales_per_month>sales", "percents": [25.0, 50.0, 75.0]}}},
        )
        with self.assertRaises(TypeError):
            PercentilesBucketAggregation("pct", "sales").percents(50)

    def test_serial_diff(self) -> None:
        agg = SerialDifferencingAggregation("thirtieth_difference", "the_sum").lag(30)
        self.assertEqual(
            agg.to_json(),
            {"thirtieth_difference": {"serial_diff": {"buckets_path": "the_sum", "lag": 30}}},
        )

    def test_moving_function(self) -> None:
        agg = MovingFunctionAggregation(
            "the_movfn", "the_sum", 10, "MovingFunctions.unweightedAvg(values)"
        ).shift(1)
        self.assertEqual(
            agg.to_json(),
            {
                "the_movfn": {
                    "moving_fn": {
                        "buckets_path": "the_sum",
                        "window": 10,
                        "script": "MovingFunctions.unweightedAvg(values)",
                        "shift": 1,
                    }
                }
            },
        )


if __name__ == "__main__":
    unittest.main()
