'''
Release Statistics

Reports the work done between the two most recent release tags of a git repository.

Tags are ordered by semantic version (tag names must read `v<semver>`). All commits reachable
from the greatest tag, but not from the second greatest one, form the release range. The
release range is aggregated by author and printed as a short changelog.
'''
