"""Gate Attendance package.

Feature modules (ledger, users, employees, attendance, reports, audit) with a
thin Flask controller layer over service/repository layers. All state lives
in a flat key-value store of JSON blobs (see ``storage``).
"""
