"""HTML pages served by the gateway: sign-in, learner dashboard and admin panel."""
from __future__ import annotations

_HEAD = """<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"UTF-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\" />
    <title>{title}</title>
    <script src=\"https://cdn.tailwindcss.com\"></script>
</head>
"""

SIGN_IN_PAGE = _HEAD.format(title="Meeting Rooms") + """<body class=\"min-h-screen bg-slate-950 text-slate-100\">
    <main class=\"mx-auto flex min-h-screen max-w-md flex-col justify-center px-6\">
        <h1 class=\"text-2xl font-semibold\">Meeting Rooms</h1>
        <p class=\"mt-1 text-sm text-slate-400\">Enter your name and level to see your rooms.</p>
        <form id=\"signIn\" class=\"mt-6 space-y-4 rounded-2xl border border-slate-800 bg-slate-900/60 p-6\">
            <input id=\"name\" required placeholder=\"Your name\" class=\"w-full rounded-lg bg-slate-950 px-3 py-2 text-sm\" />
            <select id=\"level\" class=\"w-full rounded-lg bg-slate-950 px-3 py-2 text-sm\">
                <option value=\"beginner\">Beginner</option>
                <option value=\"intermediate\">Intermediate</option>
                <option value=\"elite\">Elite</option>
            </select>
            <button class=\"w-full rounded-full bg-emerald-500 px-4 py-2 text-sm font-semibold text-black\">Continue</button>
        </form>
    </main>
    <script>
        document.getElementById('signIn').addEventListener('submit', (event) => {
            event.preventDefault();
            localStorage.setItem('name', document.getElementById('name').value.trim());
            localStorage.setItem('level', document.getElementById('level').value);
            window.location.href = '/dashboard';
        });
    </script>
</body>
</html>
"""

DASHBOARD_PAGE = _HEAD.format(title="Dashboard") + """<body class=\"min-h-screen bg-slate-950 text-slate-100\">
    <main class=\"mx-auto max-w-3xl px-6 py-8\">
        <div class=\"flex items-center justify-between\">
            <h1 id=\"greeting\" class=\"text-2xl font-semibold\">Welcome</h1>
            <a id=\"adminLink\" href=\"/admin\" class=\"hidden text-sm text-slate-400 hover:text-white\">Admin</a>
        </div>
        <p id=\"status\" class=\"mt-2 text-sm text-slate-400\">Pick a room to join.</p>
        <div class=\"mt-6 grid gap-4 sm:grid-cols-2\">
            <button id=\"generalRoom\" class=\"rounded-2xl border border-slate-800 bg-slate-900/60 p-6 text-left hover:border-emerald-400/60\">
                <p class=\"text-lg font-semibold\">General Room</p>
                <p class=\"text-sm text-slate-400\">Open to everyone.</p>
            </button>
            <button id=\"levelRoom\" class=\"rounded-2xl border border-slate-800 bg-slate-900/60 p-6 text-left hover:border-emerald-400/60\">
                <p class=\"text-lg font-semibold\">Group Room</p>
                <p id=\"levelLabel\" class=\"text-sm text-slate-400\">Your level.</p>
            </button>
        </div>
    </main>
    <script>
        const name = localStorage.getItem('name');
        const level = localStorage.getItem('level');
        if (!name || !level) {
            window.location.href = '/';
        }
        document.getElementById('greeting').textContent = `Welcome, ${name}`;
        document.getElementById('levelLabel').textContent = `Room for the ${level} group.`;
        const statusEl = document.getElementById('status');

        fetch(`/api/session?name=${encodeURIComponent(name || '')}`)
            .then((response) => response.json())
            .then((data) => {
                if (data.isAdmin) {
                    document.getElementById('adminLink').classList.remove('hidden');
                }
            })
            .catch((error) => console.error(error));

        async function join(query) {
            statusEl.textContent = 'Joining...';
            try {
                const response = await fetch(`/api/bbb?${query}`);
                const data = await response.json();
                if (data.joinUrl) {
                    window.location.href = data.joinUrl;
                } else {
                    statusEl.textContent = data.error || 'No meeting found.';
                }
            } catch (error) {
                console.error(error);
                statusEl.textContent = 'Network error while joining. Please try again.';
            }
        }

        document.getElementById('generalRoom').addEventListener('click', () => {
            join(`name=${encodeURIComponent(name)}`);
        });
        document.getElementById('levelRoom').addEventListener('click', () => {
            join(`name=${encodeURIComponent(name)}&level=${encodeURIComponent(level)}`);
        });
    </script>
</body>
</html>
"""

ADMIN_PAGE = _HEAD.format(title="Admin Panel") + """<body class=\"min-h-screen bg-slate-950 text-slate-100\">
    <main class=\"mx-auto max-w-5xl px-6 py-8\">
        <div class=\"flex items-center justify-between\">
            <div>
                <h1 class=\"text-2xl font-semibold\">Admin Panel</h1>
                <p class=\"text-sm text-slate-400\">Manage meeting rooms</p>
            </div>
            <div class=\"flex gap-3\">
                <button id=\"refresh\" class=\"rounded-full border border-slate-700 px-4 py-2 text-sm\">Refresh</button>
                <a href=\"/dashboard\" class=\"rounded-full border border-slate-700 px-4 py-2 text-sm\">Dashboard</a>
            </div>
        </div>
        <p id=\"status\" class=\"mt-4 text-sm text-slate-400\">&nbsp;</p>
        <div id=\"rooms\" class=\"mt-6 grid gap-4 md:grid-cols-2\"></div>
    </main>
    <script>
        const roomsEl = document.getElementById('rooms');
        const statusEl = document.getElementById('status');
        const adminName = localStorage.getItem('name');

        function renderRooms(items) {
            roomsEl.innerHTML = '';
            items.forEach((room) => {
                const card = document.createElement('div');
                card.className = 'rounded-2xl border border-slate-800 bg-slate-900/60 p-5';
                card.innerHTML = `
                    <div class=\"flex items-center justify-between\">
                        <p class=\"text-lg font-semibold\"></p>
                        <span class=\"rounded-full bg-slate-800 px-2 py-1 text-xs\">${room.status}</span>
                    </div>
                    <p class=\"mt-2 text-sm text-slate-400\">Participants: ${room.participantCount}</p>
                    <p class=\"text-sm text-slate-400\">Recording: ${room.recordingStatus}</p>
                    <div class=\"mt-4 flex gap-2\">
                        <button data-action=\"start\" class=\"rounded-full bg-emerald-500 px-3 py-1 text-xs font-semibold text-black\">Start</button>
                        <button data-action=\"stop\" class=\"rounded-full bg-rose-500 px-3 py-1 text-xs font-semibold text-black\">Stop</button>
                        <button data-action=\"join\" class=\"rounded-full border border-slate-600 px-3 py-1 text-xs\">Join</button>
                    </div>`;
                card.querySelector('p').textContent = room.name;
                card.querySelector('[data-action=start]').addEventListener('click', () => startMeeting(room));
                card.querySelector('[data-action=stop]').addEventListener('click', () => stopMeeting(room));
                card.querySelector('[data-action=join]').addEventListener('click', () => joinMeeting(room));
                roomsEl.appendChild(card);
            });
        }

        async function refresh() {
            statusEl.textContent = 'Loading...';
            try {
                const response = await fetch('/api/admin/rooms/status');
                const data = await response.json();
                if (!response.ok) {
                    statusEl.textContent = data.error || 'Could not load rooms.';
                    return;
                }
                renderRooms(data.items);
                statusEl.textContent = `Updated ${new Date().toLocaleTimeString()}`;
            } catch (error) {
                console.error(error);
                statusEl.textContent = 'Error fetching meeting statuses.';
            }
        }

        async function post(path, body) {
            const response = await fetch(path, {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify(body),
            });
            return response.json();
        }

        async function startMeeting(room) {
            const data = await post('/api/admin/start-meeting', { meetingID: room.key, enableRecording: true });
            statusEl.textContent = data.success ? data.message : `Failed to start meeting: ${data.error}`;
            await refresh();
        }

        async function stopMeeting(room) {
            const data = await post('/api/admin/stop-meeting', { meetingID: room.meetingID });
            statusEl.textContent = data.success ? data.message : `Failed to stop meeting: ${data.error}`;
            await refresh();
        }

        async function joinMeeting(room) {
            if (!adminName) {
                statusEl.textContent = 'Admin name not found. Please sign in again.';
                return;
            }
            const response = await fetch(`/api/bbb?name=${encodeURIComponent(adminName)}&roomId=${encodeURIComponent(room.key)}`);
            const data = await response.json();
            if (data.joinUrl) {
                window.open(data.joinUrl, '_blank');
            } else {
                statusEl.textContent = 'No meeting found or meeting is not running';
            }
        }

        async function checkAdmin() {
            if (!adminName) {
                window.location.href = '/';
                return false;
            }
            try {
                const response = await fetch(`/api/session?name=${encodeURIComponent(adminName)}`);
                const data = await response.json();
                if (data.isAdmin) {
                    return true;
                }
            } catch (error) {
                console.error(error);
            }
            window.location.href = '/';
            return false;
        }

        document.getElementById('refresh').addEventListener('click', refresh);
        checkAdmin().then((isAdmin) => {
            if (isAdmin) {
                refresh();
            }
        });
    </script>
</body>
</html>
"""
