"""Cross-cutting helpers shared by the service and scripts."""
