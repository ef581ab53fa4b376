"""
Matching and presentation rules.

intent_matcher decides what to answer; card_composer decides how a course
looks. Edit the trigger phrases and reply texts in intent_matcher.
"""
