# The aggregated router is mounted by the application factory:
#
#     from hostel_allocation.api.router import router
#     app.include_router(router)
