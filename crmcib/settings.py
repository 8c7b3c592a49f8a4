import os.path

pacemaker_binaries = "/usr/sbin/"
cibadmin_exec = os.path.join(pacemaker_binaries, "cibadmin")

# Waiting for resources to stop: the CIB is re-read at most
# wait_stop_max_retries times, wait_stop_retry_delay seconds apart.
wait_stop_max_retries = 10
wait_stop_retry_delay = 2.0

cib_bootstrap_options_id = "cib-bootstrap-options"
