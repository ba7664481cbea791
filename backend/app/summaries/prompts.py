# Fixed instruction templates. Caller data is spliced in verbatim, unescaped.

import json
from typing import Any

from app.models.summary_models import QueryDescriptor


def _splice(value: Any) -> str:
    """Text goes in as-is; anything else as compact JSON."""
    if isinstance(value, str):
        return value
    return _to_json(value)


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _render_fields(fields: str | list[str]) -> str:
    if isinstance(fields, list):
        return ",".join(fields)
    return fields


def render_query_summary_prompt(
    query: QueryDescriptor,
    description: str = "",
    next_steps_instructions: str = "",
) -> str:
    # Only a non-empty string note is included; None, "" and absent all omit the line.
    note_line = f"Query Note: {query.note_text}\n" if query.note_text else ""

    return f"""You are an expert Looker dashboard analyst tasked with summarizing dashboard queries and providing actionable next steps in Markdown format.

**Strict Formatting and Content Requirements:**

* **Markdown Output:** All responses must be formatted using Markdown. Supported elements include headings, bold, italic, links, tables, lists, code blocks, and blockquotes.
* **No Images:** Do not include or attempt to render images.
* **Numerical Formatting:** Format numerical values as percentages or dollar amounts (rounded to the nearest cent).
* **No Indentation:** Do not indent any part of your response.
* **Query-Specific Sections:** Each dashboard query summary should adhere to the following structure, starting on a new line:
    * `## Query Name`: Use the "Query Title" from the provided context.
    * `Description`: A concise (2-4 sentences) paragraph describing the query.
    * `> Summary`: A blockquote (3-5 sentences) summarizing the query results for user comprehension.
    * `## Next Steps`: A bulleted list of 2-3 actionable next steps based on the query summary.
* **Newlines and Dividers:** Each query summary must start on a new line and end with a horizontal divider (`---`).

**Context:**

Summary style/specialized instructions: {next_steps_instructions}
Dashboard Detail: {description}

Query Details: "Query Title: {query.title}
{note_line}Query Fields: {_render_fields(query.query_body.query_fields)}
Query Data: {_to_json(query.query_data)}"

**Example Output (Use as a Template, Not Verbatim):**

```markdown
## Web Traffic Over Time

This query details the amount of web traffic received to the website over the past 6 months. It includes a web traffic source field of organic, search, and display, as well as an amount field detailing the number of users from those sources.

> It appears that search has consistently driven the highest user traffic, with 9875 users in the past month and a peak in December at 1000 unique users. Organic traffic is the second highest, while display traffic is significantly lower. Display traffic started strong but declined steadily. There was a notable 23% spike in organic traffic in March.

## Next Steps
* Investigate the 23% organic traffic spike in March to identify potential causes (e.g., marketing campaign, website error).
* Segment search traffic by campaign source to identify high-performing strategies.
* Analyze display traffic patterns to determine the factors contributing to its decline and explore optimization strategies.
---
```
"""


def render_dashboard_summary_prompt(
    query_summaries: list[str],
    next_steps_instructions: str = "",
) -> str:
    data = "\n".join(query_summaries)

    return f"""You are a specialized answering assistant that can summarize a Looker dashboard and the underlying data and propose operational next steps drawing conclusions from the Query Details listed above. Follow the instructions below:

Please highlight the findings of all of the query data here. All responses MUST be based on the actual information returned by these queries:
data: {data}

For example, use the names of the locations in the data series (like Seattle, Indianapolis, Chicago, etc) in recommendations regarding locations. Use the name of a process if discussing processes. Don't use row numbers to refer to any facility, process or location. This information should be sourced from the above data.
Surface the most important or notable details and combine next steps recommendations into one bulleted list of 2-6 suggestions.

--------------
Here is an output format Example:
----------------

## Web Traffic Over Time

This query details the amount of web traffic received to the website over the past 6 months. It includes a web traffic source field of organic, search and display
as well as an amount field detailing the amount of people coming from those sources to the website.

> It looks like search historically has been driving the most user traffic with 9875 users over the past month with peak traffic happening in december at 1000 unique users.
Organic comes in second and display a distant 3rd. It seems that display got off to a decent start in the year, but has decreased in volume consistently into the end of the year.
There appears to be a large spike in organic traffic during the month of March a 23% increase from the rest of the year.

## Next Steps
* Look into the data for the month of March to determine if there was an issue in reporting and/or what sort of local events could have caused the spike
* Continue investing into search advertisement with common digital marketing strategies. IT would also be good to identify/breakdown this number by campaign source and see what strategies have been working well for Search.
* Display seems to be dropping off and variable. Use only during select months and optimize for heavily trafficed areas with a good demographic for the site retention.

-----------

Please add actionable next steps, both for immediate intervention, improved data gathering and further analysis of existing data.
Here are some tips for creating actionable next steps:
-----------
{next_steps_instructions}
-----------
"""


def render_query_suggestions_prompt(
    query_results: Any,
    query_summaries: Any,
    next_steps_instructions: str = "",
) -> str:
    results = _splice(query_results)
    summaries = _splice(query_summaries)

    return f"""You are an expert Looker analyst tasked with generating actionable next-step investigation queries in JSON format.

Your goal is to provide a JSON array of strings, where each string represents a potential Looker query or data exploration suggestion. These suggestions should directly address the "next steps" in analysis, guided by the following criteria:

* **Actionable and Looker-Executable:** Queries must be feasible within the Looker platform.
* **Targeted Investigation:** Queries should build upon the provided queryResults and querySummaries, avoiding repetition of existing analyses.
* **Alignment with Next Steps:** Queries must directly relate to the analytical "next steps" outlined in `{next_steps_instructions}` and the context provided within `{summaries}`.
* **Date Filtering:** Include a date filter in every query. If a relevant date range isn't specified in the context, default to the "last 30 days."

Here's the data context:

* **Current Data:** `{results}`
* **Previous Analysis and Next Steps:** `{summaries}`
* **Next Step Instructions:** `{next_steps_instructions}`

Output Format:

Provide your response in the following JSON format, containing exactly three querySuggestion elements:

```json
[
    {{"querySuggestion": "Show me the top XXX entries for YYY on October 13th, 2024"}},
    {{"querySuggestion": "What are the lowest values for ZZZ, grouped by AAA, in the last 30 days?"}},
    {{"querySuggestion": "What is the productivity and standard deviation for the XXX facility for the past 3 months?"}}
]
```
"""
