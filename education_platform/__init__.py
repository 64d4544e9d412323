"""Education platform backend: course catalog, learners and learner progress."""
