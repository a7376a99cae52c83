import re
from typing import Dict, List, Tuple

from resume_parser.parsers.types import (
    TextItem,
    TextScore,
    TextScores,
    FeatureSets,
)
from resume_parser.utils import dedupe_preserving_order


def compute_feature_scores(
    text_items: List[TextItem], feature_sets: FeatureSets
) -> TextScores:
    """
    Score every text item against every feature of the set.

    A feature is ``(predicate, score)`` or ``(matcher, score, return_matching_text)``.
    When a matcher returns a regex match and ``return_matching_text`` is set, the
    score goes to the matched substring instead of the whole item text, so
    "Email: jd@x.com" yields a candidate "jd@x.com".
    Scores are listed in input order, sub-matches right after their item.
    """
    text_scores: TextScores = []
    sub_match_scores: Dict[str, TextScore] = {}

    for text_item in text_items:
        base_score_obj = TextScore(text=text_item.text, score=0, match=False)
        text_scores.append(base_score_obj)

        for feature_set_item in feature_sets:
            has_feature_func = feature_set_item[0]
            score_value: int = feature_set_item[1]
            return_matching_text = False
            if len(feature_set_item) == 3:
                return_matching_text = feature_set_item[2]  # type: ignore

            result = has_feature_func(text_item)  # bool, Match or None
            if not result:
                continue

            if (
                return_matching_text
                and isinstance(result, re.Match)
                and result.group(0)
                and result.group(0) != text_item.text
            ):
                matched_text = result.group(0)
                if matched_text not in sub_match_scores:
                    sub_match_scores[matched_text] = TextScore(
                        text=matched_text, score=0, match=True
                    )
                    text_scores.append(sub_match_scores[matched_text])
                sub_match_scores[matched_text].score += score_value
            else:
                base_score_obj.score += score_value
                if return_matching_text:
                    base_score_obj.match = True

    return text_scores


def get_text_with_highest_feature_score(
    text_items: List[TextItem],
    feature_sets: FeatureSets,
    return_empty_string_if_highest_score_is_not_positive: bool = True,
    return_concatenated_string_for_texts_with_same_highest_score: bool = False,
) -> Tuple[str, TextScores]:
    """
    Return the best scoring text and every computed score (for debugging).

    Among texts sharing the highest score, regex matches win over plain items and
    the earliest text in document order wins over later ones.
    """
    if not text_items:
        return "", []

    text_scores_computed = compute_feature_scores(text_items, feature_sets)
    if not text_scores_computed:
        return "", []

    highest_score_val = max(ts_obj.score for ts_obj in text_scores_computed)
    if return_empty_string_if_highest_score_is_not_positive and highest_score_val <= 0:
        return "", text_scores_computed

    at_highest_score = [
        ts_obj for ts_obj in text_scores_computed if ts_obj.score == highest_score_val
    ]
    matched = [ts_obj.text for ts_obj in at_highest_score if ts_obj.match]
    unmatched = [ts_obj.text for ts_obj in at_highest_score if not ts_obj.match]
    final_texts_with_highest_score = dedupe_preserving_order(
        [text.strip() for text in (matched or unmatched) if text.strip()]
    )

    if not final_texts_with_highest_score:
        return "", text_scores_computed

    if return_concatenated_string_for_texts_with_same_highest_score:
        return " ".join(final_texts_with_highest_score), text_scores_computed
    return final_texts_with_highest_score[0], text_scores_computed
