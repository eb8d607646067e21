"""Location status reports for the Agent Discoveries API

Agents file periodic status reports about the locations they watch. This
feature maps submitted payloads into server-timestamped domain records,
renders stored reports in the timezone of the location they describe, and
turns the list endpoint's query string into search criteria for the store.

Endpoints require an authenticated user. Submitting a report additionally
requires acting as the report's agent (or being an admin)."""
