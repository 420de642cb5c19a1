"""Result records returned by graph queries."""
