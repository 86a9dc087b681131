"""
Pytest configuration for transcript parsing tests

Provides the reference Slack transcript and its parsed/classified forms.
"""

import pytest

from ingestion.steps.a_parsing import parse
from ingestion.steps.b_classification import classify

SAMPLE_SLACK_INPUT = """Jessica Booker
  11:13 AM
@channel Please remember to use the new protocol for LabCorp orders. All orders must include the patient's DOB in the notes field.

This is required for HIPAA compliance.

Lindsay Burden
  6:36 AM  replied to a thread:
Thanks, I'll update the macros.

Pinned by

Daniel Raphael
  9:45 AM
@channel Important update: The Quest scheduling link is temporarily down. Use the backup link until further notice.
https://backup.quest.com/schedule

image.png

Sarah Miller
  10:30 AM
Taking my break, brb

Canvas updated  7:51 AM

Mark Johnson
  8:15 AM
Quick bio break

Amanda Torres
  2:45 PM
@here We have a routing issue with Intercom tickets. Please do not accept new tickets until resolved.

Screenshot 2024-01-15.png

Tom Wilson
  3:00 PM
Restarting pc, will be back in 5

Jennifer Adams
  4:20 PM
OOO from 3pm-5pm for a doctor's appointment

Michael Chen
  5:00 PM
@channel Protocol reminder: When handling Employment Verification requests, you must verify the caller's identity before providing any information.

Steps to follow:
1. Ask for employee ID
2. Verify against system
3. Only then provide information

Lisa Park
  11:00 AM
Got it, thanks!"""


@pytest.fixture(scope="session")
def sample_text():
    return SAMPLE_SLACK_INPUT


@pytest.fixture(scope="session")
def sample_messages():
    return parse(SAMPLE_SLACK_INPUT)


@pytest.fixture(scope="session")
def sample_updates(sample_messages):
    return classify(sample_messages)


@pytest.fixture(scope="session")
def by_author(sample_messages):
    return {m.author: m for m in sample_messages}


@pytest.fixture(scope="session")
def by_owner(sample_updates):
    return {u.owner: u for u in sample_updates}
