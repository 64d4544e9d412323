"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the application needs,
without specifying HOW it's done. Persistence adapters live outside this
package.
"""
